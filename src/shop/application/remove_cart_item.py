"""Application service: Remove Item from Cart use case."""

from __future__ import annotations

import logging

from shop.application.dto import CartDTO, cart_to_dto
from shop.application.lookup import cart_for, require_user
from shop.application.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class RemoveCartItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, product_id: int, strict: bool = False) -> CartDTO:
        """Remove a product line from the user's cart.

        Removing a product that is not in the cart does nothing unless
        *strict* is set, in which case ItemNotFoundError is raised.
        """
        with self._uow:
            user = require_user(self._uow, user_id)
            cart = cart_for(self._uow, user)
            removed = cart.remove_item(product_id, strict=strict)
            if removed:
                self._uow.carts.save(cart)
                self._uow.commit()
            dto = cart_to_dto(cart, self._uow.products)

        if removed:
            logger.info("User #%s cart: removed product #%s", user_id, product_id)
        else:
            logger.debug("User #%s cart: product #%s was not present", user_id, product_id)
        return dto
