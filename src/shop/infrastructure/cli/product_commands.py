"""CLI commands for the Product aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from shop.application.add_product import AddProductHandler
from shop.application.update_product import UpdateProductHandler
from shop.infrastructure.cli.common import reported_errors, uow_from


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--serial", "serial_number", required=True, help="Serial number / SKU.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def product_add(data_dir: Path | None, name: str, serial_number: str, price: str) -> None:
    """Add a new product to the catalog."""
    with reported_errors():
        product = AddProductHandler(uow_from(data_dir)).handle(name, serial_number, price)

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(data_dir: Path | None) -> None:
    """List all products in the catalog."""
    with reported_errors():
        with uow_from(data_dir) as uow:
            products = uow.products.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Serial':<12} {'Price':>10}")
    click.echo("-" * 51)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.serial_number:<12} {str(p.price):>10}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(data_dir: Path | None, product_id: int, price: str) -> None:
    """Update a product's price (existing orders keep their price)."""
    with reported_errors():
        product = UpdateProductHandler(uow_from(data_dir)).handle(product_id, price)

    click.echo(f"Product #{product.id} price updated to {product.price}")
