"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is carried
pre-formatted (e.g. "$15.00").
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.cart import Cart
from shop.domain.model.order import Order
from shop.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class CartItemDTO:
    product_id: int
    product_name: str
    quantity: int


@dataclass(frozen=True)
class CartDTO:
    user_id: int
    items: list[CartItemDTO]
    is_empty: bool


@dataclass(frozen=True)
class OrderItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_amount: str


@dataclass(frozen=True)
class PaymentDTO:
    amount: str
    payment_method_id: int
    paid_at: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    order_key: str
    user_id: int
    status: str
    items: list[OrderItemDTO]
    sub_total: str
    payments: list[PaymentDTO]
    billing_address_id: int | None
    shipping_address_id: int | None
    is_empty: bool
    created_at: str


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_key=order.order_key,
        user_id=order.user_id,
        status=order.status.value,
        items=[
            OrderItemDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_amount=str(item.line_amount),
            )
            for item in order.items
        ],
        sub_total=str(order.sub_total),
        payments=[
            PaymentDTO(
                amount=str(payment.amount),
                payment_method_id=payment.payment_method_id,
                paid_at=payment.paid_at.strftime("%Y-%m-%d %H:%M UTC"),
            )
            for payment in order.payments
        ],
        billing_address_id=order.billing_address_id,
        shipping_address_id=order.shipping_address_id,
        is_empty=order.is_empty,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def cart_to_dto(cart: Cart, products: ProductRepository) -> CartDTO:
    items = []
    for line in cart.items:
        product = products.get_by_id(line.product_id)
        name = product.name if product is not None else f"<product #{line.product_id}>"
        items.append(
            CartItemDTO(
                product_id=line.product_id,
                product_name=name,
                quantity=line.quantity.value,
            )
        )
    return CartDTO(user_id=cart.user_id, items=items, is_empty=cart.is_empty)
