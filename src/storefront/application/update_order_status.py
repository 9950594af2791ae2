"""Application service: Update Order Status use case.

Any of the four statuses may be written over any other. A status change
never touches stock; only deleting a pending order does.
"""

from __future__ import annotations

import logging

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.service.catalog_resolver import CatalogResolver

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, status: str | None) -> Order:
        new_status = OrderStatus.parse(status)

        with self._uow.write() as store:
            order = CatalogResolver(store).require_order(order_id)
            previous = order.status
            order.change_status(new_status)

        logger.info(
            "Order #%s status %s -> %s", order_id, previous.value, new_status.value
        )
        return order
