"""Domain service: Cart-to-Order conversion.

Turns the contents of a user's cart into a new Order.  It spans two
aggregates (Cart and Order) and reads a third (Product), which is why
it lives here rather than on either aggregate.

The conversion is two-phase (resolve-then-mutate): every product is
resolved and snapshotted before the cart is touched, so a missing
product leaves the cart exactly as it was.
"""

from __future__ import annotations

import secrets

from shop.domain.exceptions import (
    CartEmptyError,
    EntityNotFoundError,
    OrderKeyUnavailableError,
)
from shop.domain.model.cart import Cart
from shop.domain.model.order import Order, OrderItem
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository

ORDER_KEY_PREFIX = "ORD-"
ORDER_KEY_BYTES = 5
MAX_KEY_ATTEMPTS = 10


class CartToOrderConverter:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo

    def convert(self, cart: Cart | None) -> Order:
        """Build a CREATED order from *cart* and empty the cart.

        Raises CartEmptyError when there is no cart or it has no items.
        The returned order is not persisted; saving it together with the
        emptied cart is the caller's transaction.
        """
        if cart is None or cart.is_empty:
            raise CartEmptyError("Cannot create an order from an empty cart")

        # Phase 1: snapshot every line
        order_items: list[OrderItem] = []
        for line in cart.items:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product #{line.product_id} in cart no longer exists"
                )
            order_items.append(
                OrderItem(
                    product_id=line.product_id,
                    product_name=product.name,
                    quantity=line.quantity,
                    unit_price=product.price,
                )
            )

        order = Order.create(
            user_id=cart.user_id,
            order_key=self._new_order_key(),
            items=order_items,
        )

        # Phase 2: consume the cart
        cart.clear()
        return order

    def _new_order_key(self) -> str:
        for _ in range(MAX_KEY_ATTEMPTS):
            key = ORDER_KEY_PREFIX + secrets.token_hex(ORDER_KEY_BYTES).upper()
            if self._order_repo.get_by_key(key) is None:
                return key
        raise OrderKeyUnavailableError(
            f"Could not generate a unique order key after {MAX_KEY_ATTEMPTS} attempts"
        )
