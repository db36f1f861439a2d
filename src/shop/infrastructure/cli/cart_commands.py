"""CLI commands for the Cart aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from shop.application.add_cart_item import AddCartItemHandler
from shop.application.clear_cart import ClearCartHandler
from shop.application.dto import CartDTO
from shop.application.remove_cart_item import RemoveCartItemHandler
from shop.application.show_cart import ShowCartHandler
from shop.application.update_cart_item import UpdateCartItemHandler
from shop.infrastructure.cli.common import reported_errors, uow_from


def _display_cart(dto: CartDTO) -> None:
    if dto.is_empty:
        click.echo(f"Cart of user #{dto.user_id} is empty.")
        return
    click.echo(f"Cart of user #{dto.user_id}")
    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5}")
    click.echo(f"  {'-'*33}")
    for item in dto.items:
        click.echo(f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5}")


@click.command("add")
@click.option("--user-id", required=True, type=int)
@click.option("--product-id", required=True, type=int)
@click.option("--qty", "quantity", default=1, show_default=True, type=int)
@click.pass_obj
def cart_add(data_dir: Path | None, user_id: int, product_id: int, quantity: int) -> None:
    """Add a product to the cart (quantities accumulate)."""
    with reported_errors():
        dto = AddCartItemHandler(uow_from(data_dir)).handle(user_id, product_id, quantity)
    _display_cart(dto)


@click.command("remove")
@click.option("--user-id", required=True, type=int)
@click.option("--product-id", required=True, type=int)
@click.option("--strict", is_flag=True, default=False, help="Fail if the product is not in the cart.")
@click.pass_obj
def cart_remove(data_dir: Path | None, user_id: int, product_id: int, strict: bool) -> None:
    """Remove a product line from the cart."""
    with reported_errors():
        dto = RemoveCartItemHandler(uow_from(data_dir)).handle(user_id, product_id, strict=strict)
    _display_cart(dto)


@click.command("update")
@click.option("--user-id", required=True, type=int)
@click.option("--product-id", required=True, type=int)
@click.option("--qty", "quantity", required=True, type=int, help="New quantity; 0 removes the line.")
@click.pass_obj
def cart_update(data_dir: Path | None, user_id: int, product_id: int, quantity: int) -> None:
    """Set the quantity of a product in the cart."""
    with reported_errors():
        dto = UpdateCartItemHandler(uow_from(data_dir)).handle(user_id, product_id, quantity)
    _display_cart(dto)


@click.command("clear")
@click.option("--user-id", required=True, type=int)
@click.pass_obj
def cart_clear(data_dir: Path | None, user_id: int) -> None:
    """Remove every item from the cart."""
    with reported_errors():
        dto = ClearCartHandler(uow_from(data_dir)).handle(user_id)
    _display_cart(dto)


@click.command("show")
@click.option("--user-id", type=int, default=None)
@click.option("--username", default=None)
@click.pass_obj
def cart_show(data_dir: Path | None, user_id: int | None, username: str | None) -> None:
    """Show a cart, looked up by user id or username."""
    if (user_id is None) == (username is None):
        raise click.UsageError("Give exactly one of --user-id or --username.")

    handler = ShowCartHandler(uow_from(data_dir))
    with reported_errors():
        if user_id is not None:
            dto = handler.by_user_id(user_id)
        else:
            dto = handler.by_username(username)  # type: ignore[arg-type]
    _display_cart(dto)
