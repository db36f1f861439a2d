"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shop.application.dto import OrderDTO, order_to_dto
from shop.application.lookup import require_order, require_user
from shop.application.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow:
            return order_to_dto(require_order(self._uow, order_id))

    def list_for_user(self, user_id: int) -> list[OrderDTO]:
        with self._uow:
            require_user(self._uow, user_id)
            return [order_to_dto(o) for o in self._uow.orders.list_by_user(user_id)]
