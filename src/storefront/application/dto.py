"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


class _Unset:
    """Marker for a patch field the caller did not supply."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class _Patch:
    """Partial update: only fields that are not UNSET are applied."""

    def supplied(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass(frozen=True)
class UserPatch(_Patch):
    name: str = UNSET
    email: str = UNSET
    age: int | None = UNSET
    city: str | None = UNSET


@dataclass(frozen=True)
class ProductPatch(_Patch):
    name: str = UNSET
    description: str = UNSET
    price: str = UNSET
    category: str = UNSET
    stock: int = UNSET
