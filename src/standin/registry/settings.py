# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Registry settings bound from the ``standin.registry`` config section."""

from __future__ import annotations

from pydantic import BaseModel, Field

from standin.core.config import config_properties
from standin.registry.catalog import DEFAULT_BUILDER_NAME


@config_properties(prefix="standin.registry")
class RegistrySettings(BaseModel):
    """Options for a :class:`~standin.registry.registry.Registry`.

    Attributes:
        import_unknown: Import unknown dotted type identifiers on demand.
        builder_name: Class-level builder looked up for named construction.
        log_substitutions: Emit a debug event whenever a substitute is served.
    """

    import_unknown: bool = False
    builder_name: str = Field(default=DEFAULT_BUILDER_NAME, min_length=1)
    log_substitutions: bool = True
