"""CLI commands for users and the records they own."""

from __future__ import annotations

from pathlib import Path

import click

from shop.application.add_address import AddAddressHandler
from shop.application.add_payment_method import AddPaymentMethodHandler
from shop.application.register_user import RegisterUserHandler
from shop.domain.model.user import PaymentType
from shop.infrastructure.cli.common import reported_errors, uow_from


@click.command("register")
@click.option("--username", required=True, help="Unique login name.")
@click.option("--first-name", default="", help="First name.")
@click.option("--last-name", default="", help="Last name.")
@click.pass_obj
def user_register(data_dir: Path | None, username: str, first_name: str, last_name: str) -> None:
    """Register a user (and provision their empty cart)."""
    with reported_errors():
        user = RegisterUserHandler(uow_from(data_dir)).handle(username, first_name, last_name)

    click.echo(f"User #{user.id} '{user.username}' registered")


@click.command("add-address")
@click.option("--user-id", required=True, type=int, help="Owner of the address.")
@click.option("--street", required=True)
@click.option("--city", required=True)
@click.option("--state", required=True)
@click.option("--zip", "zip_code", required=True, help="ZIP / postal code.")
@click.pass_obj
def user_add_address(
    data_dir: Path | None,
    user_id: int,
    street: str,
    city: str,
    state: str,
    zip_code: str,
) -> None:
    """Add an address to a user's address book."""
    with reported_errors():
        address = AddAddressHandler(uow_from(data_dir)).handle(
            user_id, street, city, state, zip_code
        )

    click.echo(f"Address #{address.id} added: {address}")


@click.command("add-payment-method")
@click.option("--user-id", required=True, type=int, help="Owner of the payment method.")
@click.option("--name", required=True, help="Name on the card / account.")
@click.option(
    "--type",
    "payment_type",
    required=True,
    type=click.Choice([t.value for t in PaymentType], case_sensitive=False),
)
@click.pass_obj
def user_add_payment_method(
    data_dir: Path | None, user_id: int, name: str, payment_type: str
) -> None:
    """Add a payment method for a user."""
    with reported_errors():
        method = AddPaymentMethodHandler(uow_from(data_dir)).handle(user_id, name, payment_type)

    click.echo(f"Payment method #{method.id} ({method.payment_type.value}) added")
