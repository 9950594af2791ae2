"""Read-side projections of orders.

These are built from an EntityStore at read time and are never written
back. A reference to a user or product that no longer exists shows up
as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class UserSummary:
    name: str
    email: str


@dataclass(frozen=True)
class ProductSummary:
    name: str
    price: Money
    category: str


@dataclass(frozen=True)
class OrderLineView:
    product_id: int
    quantity: int
    product: ProductSummary | None = None


@dataclass(frozen=True)
class OrderView:
    """An order plus the summaries joined in from users and products.

    Listings only embed ``user``; single-order reads also fill in the
    ``product`` of every line.
    """

    id: int
    user_id: int
    user: UserSummary | None
    items: list[OrderLineView]
    total: Money
    status: str
    created_at: datetime
