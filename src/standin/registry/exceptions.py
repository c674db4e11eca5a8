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
"""Registry exceptions — type resolution and substitute bookkeeping errors."""

from __future__ import annotations

from standin.kernel.exceptions import StandinException
from standin.registry.types import Pathway


class RegistryException(StandinException):
    """Base class for errors raised by the substitution registry."""


class TypeResolutionError(RegistryException, LookupError):
    """The type identifier is unknown, or the type has no builder to call."""

    def __init__(
        self,
        type_id: str,
        *,
        reason: str | None = None,
        builder: str | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        self.type_id = type_id
        self.builder = builder
        self.suggestions = suggestions or []

        if reason is None:
            reason = f"No constructible type registered as '{type_id}'"
        lines = [reason]
        if self.suggestions:
            lines.append(f"  Similar registered types: {', '.join(self.suggestions)}")
        if builder is None:
            lines.append("  Register the type with TypeCatalog.register() or @constructible")

        context = {"type_id": type_id}
        if builder is not None:
            context["builder"] = builder
        super().__init__("\n".join(lines), code="TYPE_RESOLUTION", context=context)


class SubstituteExhaustedError(RegistryException, IndexError):
    """A sequenced read found no substitute at the next position.

    Raised when more substitutes are requested than were injected, or when
    the sequence has a gap (e.g. positions 1 and 2 registered but not 0).
    """

    def __init__(self, pathway: Pathway, type_id: str, position: int, registered: list[int]) -> None:
        self.pathway = pathway
        self.type_id = type_id
        self.position = position
        self.registered = registered
        super().__init__(
            f"No {pathway.value} substitute for '{type_id}' at position {position} "
            f"(registered positions: {registered})",
            code="SUBSTITUTE_EXHAUSTED",
            context={
                "pathway": pathway.value,
                "type_id": type_id,
                "position": position,
                "registered": registered,
            },
        )


class InvalidPositionError(RegistryException, ValueError):
    """A substitute position is not a non-negative integer."""

    def __init__(self, type_id: str, position: object) -> None:
        self.type_id = type_id
        self.position = position
        super().__init__(
            f"Substitute position for '{type_id}' must be a non-negative int, got {position!r}",
            code="INVALID_POSITION",
            context={"type_id": type_id, "position": position},
        )
