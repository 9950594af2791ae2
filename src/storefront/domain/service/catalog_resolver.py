"""Domain service: Catalog Resolver.

Resolves user, product and order ids against an EntityStore snapshot and
builds the enriched order views returned by reads. It never mutates the
store.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.entity_store import EntityStore
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import User
from storefront.domain.model.views import (
    OrderLineView,
    OrderView,
    ProductSummary,
    UserSummary,
)


class CatalogResolver:

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    # --- Lookups that must succeed --------------------------------------------

    def require_user(self, user_id: int) -> User:
        user = self._store.get_user(user_id)
        if user is None:
            raise EntityNotFoundError(f"User #{user_id} not found")
        return user

    def require_product(self, product_id: int) -> Product:
        product = self._store.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    def require_order(self, order_id: int) -> Order:
        order = self._store.get_order(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order

    # --- Enrichment -----------------------------------------------------------

    def summarize_order(self, order: Order) -> OrderView:
        """Join in the owning user only (used for listings)."""
        return self._view(order, with_products=False)

    def enrich_order(self, order: Order) -> OrderView:
        """Join in the owning user and every line item's product."""
        return self._view(order, with_products=True)

    def _view(self, order: Order, with_products: bool) -> OrderView:
        return OrderView(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            user=self._user_summary(order.user_id),
            items=[
                OrderLineView(
                    product_id=line.product_id,
                    quantity=line.quantity.value,
                    product=self._product_summary(line.product_id) if with_products else None,
                )
                for line in order.items
            ],
            total=order.total,
            status=order.status.value,
            created_at=order.created_at,
        )

    def _user_summary(self, user_id: int) -> UserSummary | None:
        user = self._store.get_user(user_id)
        if user is None:
            return None
        return UserSummary(name=user.name, email=user.email)

    def _product_summary(self, product_id: int) -> ProductSummary | None:
        product = self._store.get_product(product_id)
        if product is None:
            return None
        return ProductSummary(
            name=product.name, price=product.price, category=product.category
        )
