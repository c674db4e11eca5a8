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
"""Type catalog — maps type identifiers to constructors and builders.

Real construction never goes through reflection on a bare name: every type
the registry can build is registered here with the callables to invoke.
"""

from __future__ import annotations

import difflib
import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from standin.registry.exceptions import TypeResolutionError
from standin.registry.types import type_id_of

logger = logging.getLogger(__name__)

DEFAULT_BUILDER_NAME = "create"

_UNSET: Any = object()


@dataclass(frozen=True)
class TypeBinding:
    """The callables registered for one type identifier."""

    type_id: str
    constructor: Callable[..., Any]
    builder: Callable[..., Any] | None = None
    builder_name: str | None = DEFAULT_BUILDER_NAME


class TypeCatalog:
    """Registry of constructible types, keyed by type identifier.

    A catalog may have a *parent*; lookups that miss locally continue there.
    Registries use a child of the process default catalog so that classes
    marked ``@constructible`` are always visible.

    With ``import_unknown=True`` an unknown identifier of the form
    ``"package.module.Qualname"`` is imported on first lookup and cached.
    """

    def __init__(
        self,
        *,
        parent: TypeCatalog | None = None,
        import_unknown: bool = False,
        builder_name: str = DEFAULT_BUILDER_NAME,
    ) -> None:
        self._bindings: dict[str, TypeBinding] = {}
        self._parent = parent
        self.import_unknown = import_unknown
        self.builder_name = builder_name

    def register(
        self,
        target: Callable[..., Any],
        type_id: str | None = None,
        *,
        builder: str | Callable[..., Any] | None = _UNSET,
    ) -> TypeBinding:
        """Register *target* as the constructor for *type_id*.

        Args:
            target: Class or factory callable invoked for plain construction.
            type_id: Identifier callers use; derived from *target* if omitted.
            builder: Name of the class-level builder on *target*, a callable
                to use directly, or ``None`` for no builder. Defaults to the
                catalog's builder name (``"create"``).
        """
        if not callable(target):
            raise TypeError(f"Constructor for a type must be callable, got {target!r}")
        key = type_id if type_id is not None else type_id_of(target)

        if builder is _UNSET:
            builder = self.builder_name
        if isinstance(builder, str):
            builder_name: str | None = builder
            builder_fn = getattr(target, builder, None)
            if not callable(builder_fn):
                builder_fn = None
        else:
            builder_fn = builder
            builder_name = getattr(builder, "__name__", None) if builder is not None else None

        binding = TypeBinding(type_id=key, constructor=target, builder=builder_fn, builder_name=builder_name)
        self._bindings[key] = binding
        logger.debug("Registered type '%s' (builder=%s)", key, builder_name if builder_fn is not None else None)
        return binding

    def unregister(self, type_id: str | type) -> None:
        self._bindings.pop(type_id_of(type_id), None)

    def __contains__(self, type_id: object) -> bool:
        if not isinstance(type_id, str):
            return False
        if type_id in self._bindings:
            return True
        return self._parent is not None and type_id in self._parent

    def type_ids(self) -> list[str]:
        """Every identifier visible from this catalog, local ones first."""
        ids = list(self._bindings)
        if self._parent is not None:
            ids.extend(i for i in self._parent.type_ids() if i not in self._bindings)
        return ids

    def lookup(self, type_id: str) -> TypeBinding:
        """Return the binding for *type_id*.

        Raises:
            TypeResolutionError: Nothing is registered (or importable) under
                that identifier.
        """
        binding = self._find(type_id)
        if binding is not None:
            return binding

        if self.import_unknown:
            target = _import_dotted(type_id)
            if target is not None:
                return self.register(target, type_id)

        raise TypeResolutionError(
            type_id,
            suggestions=difflib.get_close_matches(type_id, self.type_ids(), n=5, cutoff=0.6),
        )

    def _find(self, type_id: str) -> TypeBinding | None:
        binding = self._bindings.get(type_id)
        if binding is None and self._parent is not None:
            return self._parent._find(type_id)
        return binding

    def clear(self) -> None:
        """Drop local registrations; the parent is left alone."""
        self._bindings.clear()


def _import_dotted(type_id: str) -> Callable[..., Any] | None:
    """Import ``"pkg.module.Outer.Inner"`` by trying the longest module prefix first."""
    parts = type_id.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if exc.name and (module_name == exc.name or module_name.startswith(exc.name + ".")):
                continue
            raise

        target: Any = module
        for attr in parts[split:]:
            target = getattr(target, attr, None)
            if target is None:
                return None
        return target if callable(target) else None
    return None


_default_catalog = TypeCatalog()


def default_catalog() -> TypeCatalog:
    """The process-wide catalog that ``@constructible`` registers into."""
    return _default_catalog
