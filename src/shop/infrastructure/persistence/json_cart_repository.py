"""JSON-document-backed implementation of CartRepository.

A cart is stored as one record keyed by ``user_id``; saving replaces
the whole item list at once.
"""

from __future__ import annotations

from shop.domain.model.cart import Cart, CartItem
from shop.domain.model.value_objects import Quantity
from shop.domain.repository.cart_repository import CartRepository
from shop.infrastructure.persistence.json_collection import JsonCollection


class JsonCartRepository(JsonCollection, CartRepository):

    section = "carts"

    def get_by_user_id(self, user_id: int) -> Cart | None:
        raw = self._find_row("user_id", user_id)
        if raw is None:
            return None
        return Cart(
            user_id=raw["user_id"],
            items=[
                CartItem(product_id=i["product_id"], quantity=Quantity(i["quantity"]))
                for i in raw["items"]
            ],
        )

    def save(self, cart: Cart) -> None:
        self._upsert(
            "user_id",
            {
                "user_id": cart.user_id,
                "items": [
                    {"product_id": i.product_id, "quantity": i.quantity.value}
                    for i in cart.items
                ],
            },
        )
