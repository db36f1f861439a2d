"""Application service: Apply Payment use case.

The order is re-read inside the transaction, so the status check runs
against whatever the last committed transaction left behind.
"""

from __future__ import annotations

import logging

from shop.application.dto import OrderDTO, order_to_dto
from shop.application.lookup import require_order, require_user
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import InvalidOrderOperationError

logger = logging.getLogger(__name__)


class ApplyPaymentHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, payment_method_id: int) -> OrderDTO:
        with self._uow:
            order = require_order(self._uow, order_id)
            owner = require_user(self._uow, order.user_id)
            method = owner.find_payment_method(payment_method_id)

            try:
                payment = order.apply_payment(method)
            except InvalidOrderOperationError:
                logger.debug("Payment refused for order #%s (%s)", order_id, order.status.value)
                raise

            self._uow.orders.save(order)
            self._uow.commit()

        logger.info(
            "Applied payment of %s to order #%s with method #%s",
            payment.amount, order_id, payment_method_id,
        )
        return order_to_dto(order)
