"""Application service: Cancel Order use case.

Only CREATED and PAID orders can be cancelled.  Recorded payments stay
on the order; refunds are handled elsewhere.
"""

from __future__ import annotations

import logging

from shop.application.dto import OrderDTO, order_to_dto
from shop.application.lookup import require_order
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import InvalidOrderOperationError

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow:
            order = require_order(self._uow, order_id)

            try:
                order.cancel()
            except InvalidOrderOperationError:
                logger.debug("Cancellation refused for order #%s (%s)", order_id, order.status.value)
                raise

            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Cancelled order #%s (%s)", order_id, order.order_key)
        return order_to_dto(order)
