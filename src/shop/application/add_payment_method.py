"""Application service: Add Payment Method use case."""

from __future__ import annotations

import logging

from shop.application.lookup import require_user
from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import ValidationError
from shop.domain.model.user import PaymentMethod, PaymentType

logger = logging.getLogger(__name__)


class AddPaymentMethodHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: int, name: str, payment_type: str) -> PaymentMethod:
        try:
            kind = PaymentType(payment_type.upper())
        except ValueError as exc:
            allowed = ", ".join(t.value for t in PaymentType)
            raise ValidationError(
                f"Unknown payment type '{payment_type}' (expected one of {allowed})"
            ) from exc

        with self._uow:
            user = require_user(self._uow, user_id)
            method = user.add_payment_method(name, kind)
            self._uow.users.save(user)
            self._uow.commit()

        logger.info("Added payment method #%s for user #%s", method.id, user_id)
        return method
