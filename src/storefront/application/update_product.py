"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from storefront.application.dto import ProductPatch
from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.catalog_resolver import CatalogResolver

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, patch: ProductPatch) -> Product:
        """Apply the supplied fields of *patch* to a product.

        Price and stock are validated before anything changes. A new
        price does NOT affect existing orders: their totals were fixed
        when they were created.
        """
        changes = patch.supplied()
        new_price = Money.of(changes["price"]) if "price" in changes else None

        with self._uow.write() as store:
            product = CatalogResolver(store).require_product(product_id)

            if new_price is not None:
                product.update_price(new_price)
            if "stock" in changes:
                product.set_stock(changes["stock"])
            if changes.get("name"):
                product.name = changes["name"].strip()
            if "description" in changes:
                product.description = changes["description"] or ""
            if changes.get("category"):
                product.category = changes["category"].strip()

        logger.info(
            "Updated product #%s (%s)", product_id, ", ".join(sorted(changes)) or "no fields"
        )
        return product
