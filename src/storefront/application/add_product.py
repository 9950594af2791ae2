"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from storefront.application.unit_of_work import UnitOfWork
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        price: str | None,
        category: str,
        description: str = "",
        stock: int = 0,
    ) -> Product:
        """Add a new product to the catalog.

        The id is assigned inside the write cycle, against the products
        present at that moment.
        """
        if price is None or price == "":
            raise ValidationError("Name, price and category are required")

        product = Product.create(
            name=name,
            price=Money.of(price),
            category=category,
            description=description,
            stock=stock,
        )

        with self._uow.write() as store:
            store.add_product(product)

        logger.info("Added product #%s '%s' at %s", product.id, product.name, product.price)
        return product
