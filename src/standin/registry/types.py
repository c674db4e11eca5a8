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
"""Registry types: construction pathways and the no-substitute sentinel."""

from __future__ import annotations

from enum import Enum
from typing import Any, Final

TYPE_ID_ATTR = "__standin_type_id__"


class Pathway(Enum):
    """Construction pathway; each has its own substitution table."""

    PLAIN = "object"
    NAMED = "named"


class _NoSubstitute:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_SUBSTITUTE"

    def __bool__(self) -> bool:
        return False


NO_SUBSTITUTE: Final[Any] = _NoSubstitute()
"""Returned by ``Registry.resolve_substitute`` when real construction should happen."""


def type_id_of(target: Any) -> str:
    """Normalise a class (or any callable) or a string into a type identifier.

    Strings are returned untouched. A class marked ``@constructible`` uses
    the identifier it was registered under; subclasses do not inherit it.
    Everything else is identified by ``"<module>.<qualname>"``.
    """
    if isinstance(target, str):
        return target
    declared = getattr(target, "__dict__", {}).get(TYPE_ID_ATTR)
    if declared is not None:
        return declared
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", None) or getattr(target, "__name__", None)
    if qualname is None:
        raise TypeError(f"Cannot derive a type identifier from {target!r}")
    return f"{module}.{qualname}" if module else qualname
