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
"""standin — inject test doubles where production code constructs objects.

Production code builds objects through the registry::

    from standin import construct, construct_named

    mailer = construct(Mailer, [host])
    query = construct_named(OrderQuery, "o")

Tests queue substitutes with ``inject_object`` / ``inject_named`` (or
``standin.testing.substitute``) and reset the registry between tests.
"""

from standin.kernel.exceptions import ConfigurationException, StandinException
from standin.registry import (
    NO_SUBSTITUTE,
    InvalidPositionError,
    Pathway,
    Registry,
    RegistryException,
    RegistrySettings,
    SubstituteExhaustedError,
    TypeCatalog,
    TypeResolutionError,
    construct,
    construct_named,
    constructible,
    default_catalog,
    default_registry,
    get_registry,
    type_id_of,
    use_registry,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationException",
    "InvalidPositionError",
    "NO_SUBSTITUTE",
    "Pathway",
    "Registry",
    "RegistryException",
    "RegistrySettings",
    "StandinException",
    "SubstituteExhaustedError",
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
