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
"""standin registry — substitute bookkeeping and construction pathways."""

from standin.registry.catalog import TypeBinding, TypeCatalog, default_catalog
from standin.registry.context import (
    construct,
    construct_named,
    default_registry,
    get_registry,
    use_registry,
)
from standin.registry.decorators import constructible
from standin.registry.exceptions import (
    InvalidPositionError,
    RegistryException,
    SubstituteExhaustedError,
    TypeResolutionError,
)
from standin.registry.registry import Registry
from standin.registry.settings import RegistrySettings
from standin.registry.table import SubstitutionEntry, SubstitutionTable
from standin.registry.types import NO_SUBSTITUTE, Pathway, type_id_of

__all__ = [
    "InvalidPositionError",
    "NO_SUBSTITUTE",
    "Pathway",
    "Registry",
    "RegistryException",
    "RegistrySettings",
    "SubstituteExhaustedError",
    "SubstitutionEntry",
    "SubstitutionTable",
    "TypeBinding",
    "TypeCatalog",
    "TypeResolutionError",
    "construct",
    "construct_named",
    "constructible",
    "default_catalog",
    "default_registry",
    "get_registry",
    "type_id_of",
    "use_registry",
]
