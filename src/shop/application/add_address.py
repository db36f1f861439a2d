"""Application service: Add Address use case."""

from __future__ import annotations

import logging

from shop.application.lookup import require_user
from shop.application.unit_of_work import UnitOfWork
from shop.domain.model.user import Address

logger = logging.getLogger(__name__)


class AddAddressHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        user_id: int,
        street: str,
        city: str,
        state: str,
        zip_code: str,
    ) -> Address:
        with self._uow:
            user = require_user(self._uow, user_id)
            address = user.add_address(street, city, state, zip_code)
            self._uow.users.save(user)
            self._uow.commit()

        logger.info("Added address #%s for user #%s", address.id, user_id)
        return address
