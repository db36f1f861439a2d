"""Application service: Fulfilment status updates.

Completing and shipping are administrative transitions driven by the
fulfilment side, never triggered automatically by checkout or payment.
"""

from __future__ import annotations

import logging

from shop.application.dto import OrderDTO, order_to_dto
from shop.application.lookup import require_order
from shop.application.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class FulfillOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def complete(self, order_id: int) -> OrderDTO:
        """Transition CREATED|PAID -> COMPLETED."""
        with self._uow:
            order = require_order(self._uow, order_id)
            order.mark_completed()
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s marked COMPLETED", order_id)
        return order_to_dto(order)

    def ship(self, order_id: int) -> OrderDTO:
        """Transition CREATED|PAID|COMPLETED -> SHIPPED."""
        with self._uow:
            order = require_order(self._uow, order_id)
            order.mark_shipped()
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s marked SHIPPED", order_id)
        return order_to_dto(order)
