"""User aggregate and the records it owns.

The order core only ever reads users: it resolves them by id or
username, and looks up their addresses and payment methods when an
order needs one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from shop.domain.exceptions import EntityNotFoundError, ValidationError


class PaymentType(Enum):
    VISA = "VISA"
    MASTER_CARD = "MASTER_CARD"
    AMERICAN_EXPRESS = "AMERICAN_EXPRESS"
    DISCOVER = "DISCOVER"
    PAYPAL = "PAYPAL"


@dataclass
class Address:
    id: int | None
    user_id: int
    street: str
    city: str
    state: str
    zip_code: str

    def __str__(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}"


@dataclass
class PaymentMethod:
    id: int | None
    user_id: int
    name: str
    payment_type: PaymentType


@dataclass
class User:
    """Aggregate root for a registered customer.

    ``id`` stays None until the user repository persists the record;
    a user without an id is treated as unregistered everywhere.
    """

    id: int | None
    username: str
    first_name: str = ""
    last_name: str = ""
    addresses: list[Address] = field(default_factory=list)
    payment_methods: list[PaymentMethod] = field(default_factory=list)

    @staticmethod
    def create(username: str, first_name: str = "", last_name: str = "") -> User:
        if not username or not username.strip():
            raise ValidationError("Username is required")
        return User(
            id=None,
            username=username.strip(),
            first_name=first_name.strip(),
            last_name=last_name.strip(),
        )

    @property
    def is_registered(self) -> bool:
        return self.id is not None

    # --- Owned records --------------------------------------------------------

    def add_address(self, street: str, city: str, state: str, zip_code: str) -> Address:
        self._require_registered()
        if not street.strip() or not city.strip():
            raise ValidationError("Street and city are required")
        address = Address(
            id=None,
            user_id=self.id,  # type: ignore[arg-type]
            street=street.strip(),
            city=city.strip(),
            state=state.strip(),
            zip_code=zip_code.strip(),
        )
        self.addresses.append(address)
        return address

    def add_payment_method(self, name: str, payment_type: PaymentType) -> PaymentMethod:
        self._require_registered()
        if not name or not name.strip():
            raise ValidationError("Payment method name is required")
        method = PaymentMethod(
            id=None,
            user_id=self.id,  # type: ignore[arg-type]
            name=name.strip(),
            payment_type=payment_type,
        )
        self.payment_methods.append(method)
        return method

    def find_address(self, address_id: int) -> Address:
        for address in self.addresses:
            if address.id == address_id:
                return address
        raise EntityNotFoundError(
            f"Address #{address_id} not found for user '{self.username}'"
        )

    def find_payment_method(self, payment_method_id: int) -> PaymentMethod:
        for method in self.payment_methods:
            if method.id == payment_method_id:
                return method
        raise EntityNotFoundError(
            f"Payment method #{payment_method_id} not found for user '{self.username}'"
        )

    def _require_registered(self) -> None:
        if self.id is None:
            raise ValidationError(f"User '{self.username}' has not been registered")
