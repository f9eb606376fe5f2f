"""CLI commands for the shopping cart and checkout."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.domain.model.catalog import Product
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli.common import run


def _lookup(container: Container, product_id: str) -> Product:
    product = run(container.catalog_repo.get_product(product_id))
    if product is None:
        raise click.ClickException(str(EntityNotFoundError(f"Product '{product_id}' not found")))
    return product


@click.command("show")
@click.pass_obj
def cart_show(container: Container) -> None:
    """Show the cart contents."""
    ledger = container.cart_ledger()
    if ledger.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*60}")
    for item in ledger.items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {str(item.price):>14} {str(item.total):>14}"
        )
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Items':<30} {ledger.item_count():>29}")
    click.echo(f"  {'Cart Total':<30} {str(ledger.total_amount()):>29}")


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=click.IntRange(min=1))
@click.pass_obj
def cart_add(container: Container, product_id: str, quantity: int) -> None:
    """Add a product to the cart (merges with an existing entry)."""
    product = _lookup(container, product_id)
    ledger = container.cart_ledger()
    try:
        item = ledger.add(product, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Added {product.name} — now {item.quantity} in cart ({ledger.item_count()} items)")


@click.command("adjust")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="Desired quantity.")
@click.pass_obj
def cart_adjust(container: Container, product_id: str, quantity: int) -> None:
    """Set the quantity of a product as chosen on its detail page."""
    product = _lookup(container, product_id)
    ledger = container.cart_ledger()
    try:
        delta = ledger.confirm_quantity(product, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    if delta == 0:
        click.echo(f"{product.name} already has quantity {quantity}; nothing changed.")
    else:
        click.echo(f"{product.name} quantity set to {quantity} ({delta:+d})")


@click.command("set")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity; 0 removes the item.")
@click.pass_obj
def cart_set(container: Container, product_id: str, quantity: int) -> None:
    """Overwrite the quantity of a cart entry."""
    ledger = container.cart_ledger()
    try:
        ledger.set_quantity(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Cart now holds {ledger.item_count()} items, total {ledger.total_amount()}")


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(container: Container, product_id: str) -> None:
    """Remove a product from the cart."""
    ledger = container.cart_ledger()
    try:
        ledger.remove(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Cart now holds {ledger.item_count()} items, total {ledger.total_amount()}")


@click.command("checkout")
@click.option("--phone", required=True, help="Customer phone number.")
@click.option("--address", default=None, help="Delivery address.")
@click.pass_obj
def checkout(container: Container, phone: str, address: str | None) -> None:
    """Submit the cart as an order and hand it off to the merchant."""
    ledger = container.cart_ledger()
    handler = container.checkout_handler(ledger)

    receipt = run(handler.handle(customer_phone=phone, delivery_address=address))

    click.echo(f"Order #{receipt.order_id} received  (total={receipt.total})")
    click.echo(f"Our team will contact you on {phone.strip()}.")
    if receipt.message_link:
        click.echo()
        click.echo("Send your order to the merchant:")
        click.echo(receipt.message_link)
