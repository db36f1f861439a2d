"""Application service: Add Item to Cart use case."""

from __future__ import annotations

import logging

from shop.application.dto import CartDTO, cart_to_dto
from shop.application.lookup import cart_for, require_user
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class AddCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, product_id: int, quantity: int = 1) -> CartDTO:
        """Add *quantity* units of a product to the user's cart.

        Adding a product that is already in the cart increases its
        quantity rather than creating a second line.
        """
        with self._uow:
            user = require_user(self._uow, user_id)
            if self._uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")

            cart = cart_for(self._uow, user)
            line = cart.add_item(product_id, quantity)
            self._uow.carts.save(cart)
            self._uow.commit()
            dto = cart_to_dto(cart, self._uow.products)

        logger.info(
            "User #%s cart: product #%s now x%s", user_id, product_id, line.quantity
        )
        return dto
