"""Application service: Update Product Price use case."""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: int, new_price: str) -> Product:
        price = Money.of(new_price)

        with self._uow:
            product = self._uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            product.update_price(price)
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Product #%s price changed to %s", product_id, price)
        return product
