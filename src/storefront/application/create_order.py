"""Application service: Create Order use case.

Orchestrates the flow between the entity store and the domain model.
This is the only place that coordinates users, products and orders in
one mutation (user lookup + stock reservation + order creation).
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderItemSpec
from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order
from storefront.domain.service.catalog_resolver import CatalogResolver
from storefront.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int | None, item_specs: list[OrderItemSpec]) -> Order:
        """Create a new pending order.

        Steps:
        1. Reject a missing user id or an empty item list.
        2. Resolve the user (fail if not found).
        3. Let the ledger validate every item and reserve stock, all or
           nothing.
        4. Price the reserved items, insert the order and persist.

        Any failure leaves the persisted document untouched: the snapshot
        is only saved when this method returns normally.
        """
        if not user_id:
            raise ValidationError("user_id and products are required")
        if not item_specs:
            raise ValidationError("user_id and products are required")

        with self._uow.write() as store:
            CatalogResolver(store).require_user(user_id)

            reserved = InventoryLedger(store).reserve(item_specs)

            order = store.add_order(Order.create(user_id=user_id, reserved=reserved))

        logger.info(
            "Created order #%s for user #%s (total %s)", order.id, user_id, order.total
        )
        return order
