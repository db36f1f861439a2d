"""CLI commands for the Order aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from shop.application.apply_payment import ApplyPaymentHandler
from shop.application.assign_address import AssignAddressHandler
from shop.application.cancel_order import CancelOrderHandler
from shop.application.create_order import CreateOrderHandler
from shop.application.dto import OrderDTO
from shop.application.fulfill_order import FulfillOrderHandler
from shop.application.show_order import ShowOrderHandler
from shop.infrastructure.cli.common import reported_errors, uow_from


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id} {dto.order_key}  (status={dto.status})")
    click.echo(f"User:     #{dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Billing:  {_address_label(dto.billing_address_id)}")
    click.echo(f"Shipping: {_address_label(dto.shipping_address_id)}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Amount':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_amount:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Sub-total':<27} {dto.sub_total:>20}")

    if dto.payments:
        click.echo()
        click.echo("Payments:")
        for payment in dto.payments:
            click.echo(
                f"  {payment.paid_at}  {payment.amount:>10}  method #{payment.payment_method_id}"
            )


def _address_label(address_id: int | None) -> str:
    return f"address #{address_id}" if address_id is not None else "-"


@click.command("create")
@click.option("--user-id", required=True, type=int, help="User whose cart is checked out.")
@click.pass_obj
def order_create(data_dir: Path | None, user_id: int) -> None:
    """Create an order from the user's cart (empties the cart)."""
    with reported_errors():
        dto = CreateOrderHandler(uow_from(data_dir)).by_user_id(user_id)

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(data_dir: Path | None, order_id: int) -> None:
    """Show details of an existing order."""
    with reported_errors():
        dto = ShowOrderHandler(uow_from(data_dir)).handle(order_id)

    _display_order(dto)


@click.command("list")
@click.option("--user-id", required=True, type=int)
@click.pass_obj
def order_list(data_dir: Path | None, user_id: int) -> None:
    """List a user's orders."""
    with reported_errors():
        orders = ShowOrderHandler(uow_from(data_dir)).list_for_user(user_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Key':<16} {'Status':<10} {'Sub-total':>10}")
    click.echo("-" * 45)
    for dto in orders:
        click.echo(f"{dto.id:<6} {dto.order_key:<16} {dto.status:<10} {dto.sub_total:>10}")


@click.command("pay")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to pay.")
@click.option("--payment-method-id", required=True, type=int)
@click.pass_obj
def order_pay(data_dir: Path | None, order_id: int, payment_method_id: int) -> None:
    """Apply a payment of the full sub-total to an order."""
    with reported_errors():
        dto = ApplyPaymentHandler(uow_from(data_dir)).handle(order_id, payment_method_id)

    click.echo(f"Order #{dto.id} paid {dto.sub_total} (status={dto.status}).")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(data_dir: Path | None, order_id: int) -> None:
    """Cancel a CREATED or PAID order."""
    with reported_errors():
        CancelOrderHandler(uow_from(data_dir)).handle(order_id)

    click.echo(f"Order #{order_id} cancelled.")


@click.command("billing")
@click.option("--id", "order_id", required=True, type=int)
@click.option("--address-id", required=True, type=int)
@click.pass_obj
def order_billing(data_dir: Path | None, order_id: int, address_id: int) -> None:
    """Set the billing address of an order."""
    with reported_errors():
        AssignAddressHandler(uow_from(data_dir)).billing(order_id, address_id)

    click.echo(f"Order #{order_id} billing address set to #{address_id}.")


@click.command("shipping")
@click.option("--id", "order_id", required=True, type=int)
@click.option("--address-id", required=True, type=int)
@click.pass_obj
def order_shipping(data_dir: Path | None, order_id: int, address_id: int) -> None:
    """Set the shipping address of an order."""
    with reported_errors():
        AssignAddressHandler(uow_from(data_dir)).shipping(order_id, address_id)

    click.echo(f"Order #{order_id} shipping address set to #{address_id}.")


@click.command("complete")
@click.option("--id", "order_id", required=True, type=int)
@click.pass_obj
def order_complete(data_dir: Path | None, order_id: int) -> None:
    """Mark an order COMPLETED (fulfilment)."""
    with reported_errors():
        FulfillOrderHandler(uow_from(data_dir)).complete(order_id)

    click.echo(f"Order #{order_id} completed.")


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int)
@click.pass_obj
def order_ship(data_dir: Path | None, order_id: int) -> None:
    """Mark an order SHIPPED (fulfilment)."""
    with reported_errors():
        FulfillOrderHandler(uow_from(data_dir)).ship(order_id)

    click.echo(f"Order #{order_id} shipped.")
