"""Application service: Delete Product use case.

Orders that reference the product are kept as they are; single-order
reads show no product summary for those lines afterwards.
"""

from __future__ import annotations

import logging

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.model.product import Product
from storefront.domain.service.catalog_resolver import CatalogResolver

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int) -> Product:
        with self._uow.write() as store:
            product = CatalogResolver(store).require_product(product_id)
            store.remove_product(product_id)

        logger.info("Deleted product #%s", product_id)
        return product
