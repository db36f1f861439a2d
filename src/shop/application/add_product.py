"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import ValidationError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, serial_number: str, price: str) -> Product:
        """Add a new product to the catalog."""
        product = Product.create(name, serial_number, Money.of(price))

        with self._uow:
            existing = self._uow.products.get_by_serial_number(product.serial_number)
            if existing is not None:
                raise ValidationError(
                    f"Serial number '{product.serial_number}' already used by '{existing.name}'"
                )
            self._uow.products.save(product)
            self._uow.commit()

        logger.info("Added product #%s '%s' at %s", product.id, product.name, product.price)
        return product
