"""Application service: Clear Cart use case."""

from __future__ import annotations

import logging

from shop.application.dto import CartDTO, cart_to_dto
from shop.application.lookup import cart_for, require_user
from shop.application.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class ClearCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int) -> CartDTO:
        with self._uow:
            user = require_user(self._uow, user_id)
            cart = cart_for(self._uow, user)
            cart.clear()
            self._uow.carts.save(cart)
            self._uow.commit()
            dto = cart_to_dto(cart, self._uow.products)

        logger.info("User #%s cart cleared", user_id)
        return dto
