"""Application service: Create Order use case.

Checks out a registered user's cart.  The new order and the emptied
cart are written in one unit of work: either both land or neither does.
"""

from __future__ import annotations

import logging

from shop.application.dto import OrderDTO, order_to_dto
from shop.application.lookup import require_user
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import (
    CartEmptyError,
    EntityNotFoundError,
    UserNotFoundError,
)
from shop.domain.model.user import User
from shop.domain.service.cart_to_order_converter import CartToOrderConverter

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user: User) -> OrderDTO:
        """Create an order from everything in *user*'s cart.

        Steps:
        1. Reject users that were never saved (no id) before touching storage.
        2. Re-resolve the user inside the transaction (UserNotFoundError).
        3. Let the converter snapshot the cart into a CREATED order and
           empty the cart (CartEmptyError if there is nothing to order).
        4. Persist order and cart together and commit.
        """
        if not user.is_registered:
            raise UserNotFoundError(f"User '{user.username}' has not been registered")
        return self.by_user_id(user.id)  # type: ignore[arg-type]

    def by_user_id(self, user_id: int) -> OrderDTO:
        with self._uow:
            resolved = require_user(self._uow, user_id)
            cart = self._uow.carts.get_by_user_id(resolved.id)  # type: ignore[arg-type]

            converter = CartToOrderConverter(self._uow.products, self._uow.orders)
            try:
                order = converter.convert(cart)
            except (CartEmptyError, EntityNotFoundError):
                logger.debug("Checkout rejected for user #%s", user_id, exc_info=True)
                raise

            self._uow.orders.save(order)
            self._uow.carts.save(cart)  # type: ignore[arg-type]
            self._uow.commit()

        logger.info(
            "Created order #%s (%s) for user #%s: %d line(s), sub-total %s",
            order.id, order.order_key, order.user_id, len(order.items), order.sub_total,
        )
        return order_to_dto(order)
