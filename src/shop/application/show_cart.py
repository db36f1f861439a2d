"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shop.application.dto import CartDTO, cart_to_dto
from shop.application.lookup import cart_for, require_user, require_user_by_username
from shop.application.unit_of_work import UnitOfWork


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def by_user_id(self, user_id: int) -> CartDTO:
        with self._uow:
            user = require_user(self._uow, user_id)
            return cart_to_dto(cart_for(self._uow, user), self._uow.products)

    def by_username(self, username: str) -> CartDTO:
        with self._uow:
            user = require_user_by_username(self._uow, username)
            return cart_to_dto(cart_for(self._uow, user), self._uow.products)
