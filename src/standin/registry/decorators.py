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
"""@constructible — register a class with a type catalog at definition time."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from standin.registry.catalog import _UNSET, TypeCatalog, default_catalog
from standin.registry.types import TYPE_ID_ATTR

T = TypeVar("T", bound=type)


@overload
def constructible(cls: T) -> T: ...


@overload
def constructible(
    *,
    type_id: str | None = None,
    builder: str | Callable[..., Any] | None = ...,
    catalog: TypeCatalog | None = None,
) -> Callable[[T], T]: ...


def constructible(
    cls: T | None = None,
    *,
    type_id: str | None = None,
    builder: str | Callable[..., Any] | None = _UNSET,
    catalog: TypeCatalog | None = None,
) -> T | Callable[[T], T]:
    """Make a class constructible through the registry.

    Can be used with or without arguments::

        @constructible
        class Mailer: ...

        @constructible(type_id="orders.query", builder="create")
        class OrderQuery:
            @classmethod
            def create(cls, alias=None, criteria=None): ...
    """

    def decorator(cls: T) -> T:
        binding = (catalog or default_catalog()).register(cls, type_id, builder=builder)
        setattr(cls, TYPE_ID_ATTR, binding.type_id)
        return cls

    if cls is not None:
        return decorator(cls)
    return decorator
