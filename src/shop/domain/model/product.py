"""Product aggregate.

Products belong to the catalog, not to carts or orders. Carts refer to
them by id; orders copy name and price into their own line snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money


@dataclass
class Product:
    """A catalog entry identified by ``id`` and carrying a serial number."""

    id: int | None
    name: str
    serial_number: str
    price: Money

    @staticmethod
    def create(name: str, serial_number: str, price: Money) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not serial_number or not serial_number.strip():
            raise ValidationError("Product serial number is required")
        if price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        return Product(
            id=None,
            name=name.strip(),
            serial_number=serial_number.strip(),
            price=price,
        )

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Orders already created keep the price they were snapshotted with.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
