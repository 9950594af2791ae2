"""Application service: Show/List Products use cases (queries)."""

from __future__ import annotations

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.model.product import Product
from storefront.domain.service.catalog_resolver import CatalogResolver


class ShowProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> Product:
        return CatalogResolver(self._uow.read()).require_product(product_id)


class ListProductsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, category: str | None = None) -> list[Product]:
        """List products, optionally only those in *category* (any case)."""
        products = self._uow.read().products
        if category is not None:
            wanted = category.casefold()
            products = [p for p in products if p.category.casefold() == wanted]
        return list(products)
