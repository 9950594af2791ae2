"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items. Line items are
fixed once the order exists; after creation only the status changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: str | None) -> OrderStatus:
        """Map a raw status string onto the enum, rejecting anything else."""
        for status in cls:
            if status.value == value:
                return status
        valid = ", ".join(s.value for s in cls)
        raise ValidationError(f"Invalid status {value!r} (valid statuses: {valid})")


@dataclass(frozen=True)
class OrderLineItem:
    """A (product, quantity) pair owned by its order."""

    product_id: int
    quantity: Quantity


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating.
    """

    id: int | None
    user_id: int
    items: list[OrderLineItem]
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(user_id: int, reserved: list[tuple[Product, int]]) -> Order:
        """Create a pending order from already reserved (product, quantity) pairs.

        The total is computed here from the prices as they are right now and
        never recomputed afterwards.
        """
        if not reserved:
            raise ValidationError("Order must contain at least one item")

        items = [
            OrderLineItem(product_id=product.id, quantity=Quantity(qty))  # type: ignore[arg-type]
            for product, qty in reserved
        ]
        return Order(
            id=None,
            user_id=user_id,
            items=items,
            total=Order.price(reserved),
        )

    @staticmethod
    def price(reserved: list[tuple[Product, int]]) -> Money:
        total = Money.zero()
        for product, qty in reserved:
            total = total + product.price * qty
        return total.rounded()

    # --- State transitions ----------------------------------------------------

    def change_status(self, status: OrderStatus) -> None:
        """Overwrite the status.

        Any status may replace any other; stock is only ever touched when
        an order is deleted.
        """
        self.status = status

    @property
    def holds_reservation(self) -> bool:
        """True while the stock taken at creation has not been handed on."""
        return self.status == OrderStatus.PENDING
