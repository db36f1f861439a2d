"""Application service: Assign Billing / Shipping Address use case.

Addresses can be (re)assigned at any status, including after payment
or cancellation.  The address must belong to the order's owner.
"""

from __future__ import annotations

import logging

from shop.application.dto import OrderDTO, order_to_dto
from shop.application.lookup import require_order, require_user
from shop.application.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class AssignAddressHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def billing(self, order_id: int, address_id: int) -> OrderDTO:
        return self._assign(order_id, address_id, "billing")

    def shipping(self, order_id: int, address_id: int) -> OrderDTO:
        return self._assign(order_id, address_id, "shipping")

    def _assign(self, order_id: int, address_id: int, kind: str) -> OrderDTO:
        with self._uow:
            order = require_order(self._uow, order_id)
            address = require_user(self._uow, order.user_id).find_address(address_id)

            if kind == "billing":
                order.assign_billing_address(address.id)  # type: ignore[arg-type]
            else:
                order.assign_shipping_address(address.id)  # type: ignore[arg-type]

            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s %s address set to #%s", order_id, kind, address_id)
        return order_to_dto(order)
