"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, stock moves up and down as orders reserve and release it,
and products are added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariants:
    - ``price`` is always greater than zero
    - ``stock`` is never negative
    """

    id: int | None
    name: str
    price: Money
    category: str
    description: str = ""
    stock: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        price: Money,
        category: str,
        description: str = "",
        stock: int = 0,
    ) -> Product:
        """Create a new catalog entry, enforcing all invariants."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not category or not category.strip():
            raise ValidationError("Product category is required")

        product = Product(
            id=None,
            name=name.strip(),
            price=Money.zero(),
            category=category.strip(),
            description=description or "",
        )
        product.update_price(price)
        product.set_stock(stock)
        return product

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because an order's total
        is fixed at creation time.
        """
        if not new_price.is_positive:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def set_stock(self, quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError("Stock must be an integer")
        if quantity < 0:
            raise ValidationError("Stock cannot be negative")
        self.stock = quantity

    def reserve(self, quantity: int) -> None:
        """Take *quantity* units out of stock for a new order."""
        if quantity > self.stock:
            raise InsufficientStockError(
                f"Insufficient stock for product {self.name} "
                f"(need {quantity}, have {self.stock})"
            )
        self.stock -= quantity

    def restore(self, quantity: int) -> None:
        """Put units back after a pending order is cancelled."""
        self.stock += quantity
