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
"""Active registry handle backed by contextvars.

Production code reaches the registry through ``get_registry()`` (or the
module-level ``construct`` helpers) rather than a module global, so tests can
install a fresh registry for a block with ``use_registry()``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

from standin.registry.registry import Registry

_active_registry: ContextVar[Registry | None] = ContextVar("standin_active_registry", default=None)
_default_registry: Registry | None = None


def default_registry() -> Registry:
    """The process-wide registry, created on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = Registry()
    return _default_registry


def get_registry() -> Registry:
    """The registry installed for the current context, else the process default."""
    registry = _active_registry.get()
    return registry if registry is not None else default_registry()


@contextmanager
def use_registry(registry: Registry | None = None) -> Iterator[Registry]:
    """Install *registry* (a new one if omitted) for the duration of the block."""
    registry = registry if registry is not None else Registry()
    token = _active_registry.set(registry)
    try:
        yield registry
    finally:
        _active_registry.reset(token)


def construct(type_id: str | type, args: Sequence[Any] | None = None) -> Any:
    """``get_registry().construct(...)``."""
    return get_registry().construct(type_id, args)


def construct_named(type_id: str | type, arg1: Any = None, arg2: Any = None) -> Any:
    """``get_registry().construct_named(...)``."""
    return get_registry().construct_named(type_id, arg1, arg2)
