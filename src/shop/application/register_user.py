"""Application service: Register User use case.

Registration also provisions the user's (empty) cart in the same
transaction, so every registered user has exactly one cart.
"""

from __future__ import annotations

import logging

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import ValidationError
from shop.domain.model.cart import Cart
from shop.domain.model.user import User

logger = logging.getLogger(__name__)


class RegisterUserHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, username: str, first_name: str = "", last_name: str = "") -> User:
        user = User.create(username, first_name, last_name)

        with self._uow:
            if self._uow.users.get_by_username(user.username) is not None:
                raise ValidationError(f"Username '{user.username}' is already taken")

            self._uow.users.save(user)
            self._uow.carts.save(Cart(user_id=user.id))  # type: ignore[arg-type]
            self._uow.commit()

        logger.info("Registered user #%s (%s)", user.id, user.username)
        return user
