"""Application service: Cancel Order use case.

Deletes an order. If it was still pending, the stock it reserved at
creation goes back to the products first. Orders in any other status
are removed without touching stock.
"""

from __future__ import annotations

import logging

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.model.order import Order
from storefront.domain.service.catalog_resolver import CatalogResolver
from storefront.domain.service.inventory_ledger import InventoryLedger

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> Order:
        with self._uow.write() as store:
            order = CatalogResolver(store).require_order(order_id)

            if order.holds_reservation:
                InventoryLedger(store).restore(order.items)

            store.remove_order(order_id)

        logger.info(
            "Cancelled order #%s (status %s, stock restored: %s)",
            order_id,
            order.status.value,
            order.holds_reservation,
        )
        return order
