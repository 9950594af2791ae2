"""Application service: Show/List Orders use cases (queries)."""

from __future__ import annotations

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.model.views import OrderView
from storefront.domain.service.catalog_resolver import CatalogResolver


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderView:
        """Return one order with its user and every line's product joined in."""
        resolver = CatalogResolver(self._uow.read())
        return resolver.enrich_order(resolver.require_order(order_id))


class ListOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        status: str | None = None,
        user_id: int | None = None,
    ) -> list[OrderView]:
        """List orders, optionally filtered, each with its user summary."""
        store = self._uow.read()
        orders = store.orders

        if status is not None:
            # An unknown status matches nothing.
            orders = [o for o in orders if o.status.value == status]
        if user_id is not None:
            orders = [o for o in orders if o.user_id == user_id]

        resolver = CatalogResolver(store)
        return [resolver.summarize_order(o) for o in orders]
