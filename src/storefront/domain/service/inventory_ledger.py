"""Domain service: Inventory Ledger.

This service coordinates the cross-aggregate operation of reserving
or restoring product stock for an order. It lives in the domain layer
because the logic is a core business rule, not just orchestration.

The two-phase approach (validate-then-mutate) ensures we never leave
stock in a partially-reserved state if one line item fails validation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from storefront.domain.model.entity_store import EntityStore
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.product import Product

logger = logging.getLogger(__name__)


class ItemRequest(Protocol):
    product_id: int
    quantity: int


class InventoryLedger:

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def reserve(self, items: Iterable[ItemRequest]) -> list[tuple[Product, int]]:
        """Take stock for every requested item, or for none of them.

        Phase 1 — resolve and validate every item against the snapshot:
                  the product must exist, the quantity must be a positive
                  integer, and the product's stock must cover the summed
                  quantity requested for it across the whole order.
        Phase 2 — apply all decrements.

        Returns the resolved (product, quantity) pairs in request order.
        """
        # Phase 1: resolve and validate, no mutation yet
        resolved: list[tuple[Product, int]] = []
        requested: dict[int, int] = {}

        for item in items:
            product = self._store.get_product(item.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product with ID {item.product_id} not found"
                )
            qty = item.quantity
            if isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
                raise ValidationError("Quantity must be greater than zero")

            needed = requested.get(item.product_id, 0) + qty
            if needed > product.stock:
                raise InsufficientStockError(
                    f"Insufficient stock for product {product.name} "
                    f"(need {needed}, have {product.stock})"
                )
            requested[item.product_id] = needed
            resolved.append((product, qty))

        # Phase 2: mutate
        for product, qty in resolved:
            product.reserve(qty)

        logger.debug("Reserved stock for %d line item(s)", len(resolved))
        return resolved

    def restore(self, items: Iterable[OrderLineItem]) -> None:
        """Give back the stock a pending order took at creation.

        Products that have since been deleted are skipped.
        """
        for line in items:
            product = self._store.get_product(line.product_id)
            if product is None:
                logger.warning(
                    "Product %s no longer exists; %s unit(s) not restored",
                    line.product_id,
                    line.quantity.value,
                )
                continue
            product.restore(line.quantity.value)
