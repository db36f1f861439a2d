"""Cart aggregate: the items a user has collected before checkout.

Each registered user has at most one Cart.  The cart is never destroyed:
checking out empties it in place so the user can start collecting again.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.exceptions import ItemNotFoundError, ValidationError
from shop.domain.model.value_objects import Quantity


@dataclass
class CartItem:
    product_id: int
    quantity: Quantity


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    Invariants:
    - at most one line per product (repeated adds accumulate)
    - every line has a quantity >= 1
    """

    user_id: int
    items: list[CartItem] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity.value for item in self.items)

    def add_item(self, product_id: int, quantity: int = 1) -> CartItem:
        """Add *quantity* units of a product, merging with an existing line."""
        added = Quantity(quantity)
        line = self._find_item(product_id)
        if line is None:
            line = CartItem(product_id=product_id, quantity=added)
            self.items.append(line)
        else:
            line.quantity = line.quantity + added
        return line

    def remove_item(self, product_id: int, strict: bool = False) -> bool:
        """Drop the line for *product_id*.

        Removal is best-effort: an absent product is a no-op returning
        False, unless ``strict`` asks for ItemNotFoundError instead.
        """
        line = self._find_item(product_id)
        if line is None:
            if strict:
                raise ItemNotFoundError(
                    f"Product #{product_id} is not in the cart"
                )
            return False
        self.items.remove(line)
        return True

    def update_item(self, product_id: int, quantity: int) -> None:
        """Set the absolute quantity of a line; ``quantity <= 0`` removes it."""
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity <= 0:
            self.remove_item(product_id)
            return
        line = self._find_item(product_id)
        if line is None:
            self.items.append(CartItem(product_id=product_id, quantity=Quantity(quantity)))
        else:
            line.quantity = Quantity(quantity)

    def clear(self) -> None:
        self.items = []

    def _find_item(self, product_id: int) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
