"""Shared lookups used by several handlers inside an open unit of work."""

from __future__ import annotations

from shop.application.unit_of_work import UnitOfWork
from shop.domain.exceptions import EntityNotFoundError, UserNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.order import Order
from shop.domain.model.user import User


def require_user(uow: UnitOfWork, user_id: int | None) -> User:
    if user_id is None:
        raise UserNotFoundError("User has not been registered")
    user = uow.users.get_by_id(user_id)
    if user is None:
        raise UserNotFoundError(f"User #{user_id} not found")
    return user


def require_user_by_username(uow: UnitOfWork, username: str) -> User:
    user = uow.users.get_by_username(username)
    if user is None:
        raise UserNotFoundError(f"User '{username}' not found")
    return user


def require_order(uow: UnitOfWork, order_id: int) -> Order:
    order = uow.orders.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order #{order_id} not found")
    return order


def cart_for(uow: UnitOfWork, user: User) -> Cart:
    """Return the user's cart, or a fresh empty one if none is stored yet."""
    cart = uow.carts.get_by_user_id(user.id)  # type: ignore[arg-type]
    if cart is None:
        cart = Cart(user_id=user.id)  # type: ignore[arg-type]
    return cart
