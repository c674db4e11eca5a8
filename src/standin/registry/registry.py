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
"""Substitution registry — hands out test doubles in place of real objects.

Production code asks the registry for objects instead of instantiating them::

    mailer = registry.construct("app.Mailer", [smtp_host])
    query = registry.construct_named("app.OrderQuery", "o")

Tests queue substitutes ahead of time::

    registry.inject_object("app.Mailer", fake_mailer)          # every request
    registry.inject_named("app.OrderQuery", first, 0)           # first request
    registry.inject_named("app.OrderQuery", second, 1)          # second request

and call ``reset()`` between tests.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from standin.core.config import Config
from standin.registry.catalog import TypeBinding, TypeCatalog, default_catalog
from standin.registry.exceptions import TypeResolutionError
from standin.registry.settings import RegistrySettings
from standin.registry.table import SubstitutionTable
from standin.registry.types import NO_SUBSTITUTE, Pathway, type_id_of

logger = logging.getLogger(__name__)


class Registry:
    """Brokers construction requests, serving substitutes when any are queued.

    Holds one :class:`SubstitutionTable` per :class:`Pathway`. The plain
    table serves :meth:`construct`, the named table serves
    :meth:`construct_named`; the two never affect each other.

    When *catalog* is omitted the registry builds a child of the default
    catalog from *settings* (``import_unknown``, ``builder_name``). A catalog
    passed in keeps its own options; *settings* then only controls logging.
    """

    def __init__(
        self,
        catalog: TypeCatalog | None = None,
        settings: RegistrySettings | None = None,
    ) -> None:
        self.settings = settings or RegistrySettings()
        self.catalog = catalog or TypeCatalog(
            parent=default_catalog(),
            import_unknown=self.settings.import_unknown,
            builder_name=self.settings.builder_name,
        )
        self._tables: dict[Pathway, SubstitutionTable] = {p: SubstitutionTable(p) for p in Pathway}

    @classmethod
    def from_config(cls, config: Config) -> Registry:
        """Build a registry from the ``standin.registry`` config section."""
        return cls(settings=config.bind(RegistrySettings))

    def table(self, pathway: Pathway) -> SubstitutionTable:
        return self._tables[pathway]

    def reset(self) -> None:
        """Forget every substitute and consumption counter in both tables."""
        for table in self._tables.values():
            table.clear()
        logger.debug("Registry reset")

    # -- registration -------------------------------------------------------

    def register_substitute(
        self,
        pathway: Pathway,
        type_id: str | type,
        instance: Any,
        position: int | None = None,
    ) -> None:
        """Queue *instance* for *type_id* in the table for *pathway*.

        Without *position* the instance becomes a singleton substitute. With
        a zero-based *position* it is stored in that slot of a sequence;
        slots may be filled in any order and are served in ascending order.
        Switching an entry between singleton and sequence replaces it.
        """
        key = type_id_of(type_id)
        table = self._tables[pathway]
        previous = table.mode(key)
        table.put(key, instance, position)

        current = "singleton" if position is None else "sequence"
        if previous is not None and previous != current:
            logger.warning(
                "Replaced %s %s substitute for '%s' with a %s",
                previous,
                pathway.value,
                key,
                current,
            )
        logger.debug("Registered %s substitute for '%s' (position=%s)", pathway.value, key, position)

    def inject_object(self, type_id: str | type, instance: Any, position: int | None = None) -> None:
        """Queue a substitute for :meth:`construct`."""
        self.register_substitute(Pathway.PLAIN, type_id, instance, position)

    def inject_named(self, type_id: str | type, instance: Any, position: int | None = None) -> None:
        """Queue a substitute for :meth:`construct_named`."""
        self.register_substitute(Pathway.NAMED, type_id, instance, position)

    # -- lookup -------------------------------------------------------------

    def resolve_substitute(self, pathway: Pathway, type_id: str | type) -> Any:
        """Return the substitute for the next request, or ``NO_SUBSTITUTE``.

        Sequenced entries advance their counter. Nothing is constructed.

        Raises:
            SubstituteExhaustedError: The sequence has no instance at the
                next position.
        """
        key = type_id_of(type_id)
        substitute = self._tables[pathway].take(key)
        if substitute is not NO_SUBSTITUTE and self.settings.log_substitutions:
            logger.debug(
                "Served %s substitute for '%s' (consumed=%d)",
                pathway.value,
                key,
                self._tables[pathway].consumed(key),
            )
        return substitute

    def has_substitute(self, pathway: Pathway, type_id: str | type) -> bool:
        return type_id_of(type_id) in self._tables[pathway]

    def consumed(self, pathway: Pathway, type_id: str | type) -> int:
        """How many sequenced substitutes have been served for *type_id*."""
        return self._tables[pathway].consumed(type_id_of(type_id))

    def remaining(self, pathway: Pathway, type_id: str | type) -> list[int]:
        return self._tables[pathway].remaining(type_id_of(type_id))

    def unconsumed(self) -> dict[tuple[Pathway, str], list[int]]:
        """Every sequenced entry that still has positions waiting to be served."""
        pending: dict[tuple[Pathway, str], list[int]] = {}
        for pathway, table in self._tables.items():
            for key in table:
                positions = table.remaining(key)
                if positions:
                    pending[(pathway, key)] = positions
        return pending

    # -- construction -------------------------------------------------------

    def construct(self, type_id: str | type, args: Sequence[Any] | None = None) -> Any:
        """Return a substitute or a new instance of *type_id*.

        With no substitute queued, the registered constructor is called with
        no arguments, or with *args* expanded positionally. Errors raised by
        the constructor (e.g. ``TypeError`` for a wrong argument count)
        propagate unchanged.

        Raises:
            TypeResolutionError: *type_id* is an identifier missing from the catalog.
        """
        substitute = self.resolve_substitute(Pathway.PLAIN, type_id)
        if substitute is not NO_SUBSTITUTE:
            return substitute

        binding = self._binding(type_id)
        logger.debug("Constructing '%s'", binding.type_id)
        if args is None:
            return binding.constructor()
        return binding.constructor(*args)

    def construct_named(self, type_id: str | type, arg1: Any = None, arg2: Any = None) -> Any:
        """Return a substitute or the result of the type's builder.

        With no substitute queued, the type's class-level builder (``create``
        unless configured otherwise) is called as ``builder(arg1, arg2)``.
        When a substitute is served the arguments are ignored.

        Raises:
            TypeResolutionError: *type_id* is not in the catalog, or it has
                no builder.
        """
        substitute = self.resolve_substitute(Pathway.NAMED, type_id)
        if substitute is not NO_SUBSTITUTE:
            return substitute

        binding = self._binding(type_id)
        if binding.builder is None:
            builder_name = binding.builder_name or self.catalog.builder_name
            raise TypeResolutionError(
                binding.type_id,
                reason=f"Type '{binding.type_id}' has no builder '{builder_name}'",
                builder=builder_name,
            )
        logger.debug("Building '%s' through its builder", binding.type_id)
        return binding.builder(arg1, arg2)

    def _binding(self, type_id: str | type) -> TypeBinding:
        """Look up *type_id*; a class passed directly is registered on first use."""
        key = type_id_of(type_id)
        if not isinstance(type_id, str) and key not in self.catalog:
            return self.catalog.register(type_id, key)
        return self.catalog.lookup(key)
