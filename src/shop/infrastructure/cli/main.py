import logging
from pathlib import Path

import click

from shop.infrastructure.bootstrap import DATA_DIR_ENV
from shop.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from shop.infrastructure.cli.order_commands import (
    order_billing,
    order_cancel,
    order_complete,
    order_create,
    order_list,
    order_pay,
    order_ship,
    order_shipping,
    order_show,
)
from shop.infrastructure.cli.product_commands import product_add, product_list, product_update
from shop.infrastructure.cli.user_commands import (
    user_add_address,
    user_add_payment_method,
    user_register,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help=f"Directory holding shop.json (env: {DATA_DIR_ENV}).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Shop: carts, orders and payments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


@cli.group()
def user() -> None:
    """Manage users, addresses and payment methods."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
user.add_command(user_register)
user.add_command(user_add_address)
user.add_command(user_add_payment_method)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_update)
cart.add_command(cart_clear)
cart.add_command(cart_show)
order.add_command(order_create)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_pay)
order.add_command(order_cancel)
order.add_command(order_billing)
order.add_command(order_shipping)
order.add_command(order_complete)
order.add_command(order_ship)
