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
"""Substitution tables and their consumption counters."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from standin.registry.exceptions import InvalidPositionError, SubstituteExhaustedError
from standin.registry.types import NO_SUBSTITUTE, Pathway


@dataclass
class SubstitutionEntry:
    """Substitutes registered for one type identifier.

    Exactly one of ``singleton`` / ``sequence`` is in use: a singleton is
    returned on every request, a sequence is consumed position by position.
    """

    singleton: Any = field(default=NO_SUBSTITUTE, repr=False)
    sequence: dict[int, Any] | None = field(default=None, repr=False)

    @property
    def is_sequence(self) -> bool:
        return self.sequence is not None

    @property
    def positions(self) -> list[int]:
        return sorted(self.sequence) if self.sequence is not None else []

    def is_empty(self) -> bool:
        if self.sequence is not None:
            return not self.sequence
        return self.singleton is NO_SUBSTITUTE


class SubstitutionTable:
    """Maps type identifiers to substitutes for one construction pathway.

    Keeps a consumption counter per type identifier next to the entries. A
    counter only grows; ``clear()`` is the only way to rewind it.
    """

    def __init__(self, pathway: Pathway) -> None:
        self.pathway = pathway
        self._entries: dict[str, SubstitutionEntry] = {}
        self._consumed: dict[str, int] = {}

    def __contains__(self, type_id: object) -> bool:
        entry = self._entries.get(type_id)  # type: ignore[arg-type]
        return entry is not None and not entry.is_empty()

    def __len__(self) -> int:
        return sum(1 for entry in self._entries.values() if not entry.is_empty())

    def __iter__(self) -> Iterator[str]:
        return (type_id for type_id, entry in self._entries.items() if not entry.is_empty())

    def mode(self, type_id: str) -> str | None:
        """``"singleton"``, ``"sequence"``, or ``None`` when nothing is registered."""
        if type_id not in self:
            return None
        return "sequence" if self._entries[type_id].is_sequence else "singleton"

    def put(self, type_id: str, instance: Any, position: int | None = None) -> None:
        """Store *instance* as the singleton, or at *position* of the sequence.

        A singleton replaces any existing sequence; a positioned insert turns a
        singleton entry into a sequence. Other positions are left untouched.
        """
        if position is None:
            self._entries[type_id] = SubstitutionEntry(singleton=instance)
            return

        if isinstance(position, bool) or not isinstance(position, int) or position < 0:
            raise InvalidPositionError(type_id, position)

        entry = self._entries.get(type_id)
        sequence = entry.sequence if entry is not None else None
        if sequence is None:
            sequence = {}
            self._entries[type_id] = SubstitutionEntry(sequence=sequence)
        sequence[position] = instance

    def take(self, type_id: str) -> Any:
        """Return the substitute for the next request, or ``NO_SUBSTITUTE``.

        Raises:
            SubstituteExhaustedError: The entry is a sequence with nothing at
                the next position. The counter is left where it was.
        """
        entry = self._entries.get(type_id)
        if entry is None or entry.is_empty():
            return NO_SUBSTITUTE
        if entry.sequence is None:
            return entry.singleton

        position = self._consumed.get(type_id, 0)
        if position not in entry.sequence:
            raise SubstituteExhaustedError(self.pathway, type_id, position, entry.positions)
        self._consumed[type_id] = position + 1
        return entry.sequence[position]

    def consumed(self, type_id: str) -> int:
        return self._consumed.get(type_id, 0)

    def remaining(self, type_id: str) -> list[int]:
        """Sequence positions not consumed yet (always empty for singletons)."""
        entry = self._entries.get(type_id)
        if entry is None or not entry.is_sequence:
            return []
        start = self.consumed(type_id)
        return [p for p in entry.positions if p >= start]

    def clear(self) -> None:
        self._entries.clear()
        self._consumed.clear()
