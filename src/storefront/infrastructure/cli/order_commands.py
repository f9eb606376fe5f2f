"""CLI commands for admin order tracking."""

from __future__ import annotations

from datetime import datetime

import click

from storefront.application.dto import order_to_dto
from storefront.application.order_tracking import OrderFilter, filter_orders, paginate
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.domain.service.status_policy import parse_status
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli.common import print_order_table, run

_STATUS_CHOICES = click.Choice([s.value for s in OrderStatus])


@click.command("list")
@click.option("--status", type=_STATUS_CHOICES, default=None, help="Only orders in this status.")
@click.option("--phone", default="", help="Phone number contains.")
@click.option("--address", default="", help="Delivery address contains.")
@click.option("--from", "date_from", type=click.DateTime(["%Y-%m-%d"]), default=None)
@click.option("--to", "date_to", type=click.DateTime(["%Y-%m-%d"]), default=None)
@click.option("--page", default=1, show_default=True, type=click.IntRange(min=1))
@click.pass_obj
def order_list(
    container: Container,
    status: str | None,
    phone: str,
    address: str,
    date_from: datetime | None,
    date_to: datetime | None,
    page: int,
) -> None:
    """List orders, newest first."""
    tracking = container.order_tracking()
    orders = run(tracking.load())

    criteria = OrderFilter(
        status=OrderStatus(status) if status else None,
        phone=phone,
        address=address,
        date_from=date_from.date() if date_from else None,
        date_to=date_to.date() if date_to else None,
    )
    try:
        result = paginate(filter_orders(orders, criteria), page)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total orders: {len(orders)}  (matching: {result.total_items})")
    if not result.items:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<10} {'Created':<22} {'Status':<12} {'Items':>6} {'Phone':<16} {'Total':>14}")
    click.echo("-" * 85)
    for order in result.items:
        dto = order_to_dto(order)
        click.echo(
            f"{dto.short_id:<10} {dto.created_at:<22} {dto.status:<12} "
            f"{dto.item_count:>6} {dto.customer_phone:<16} {dto.total:>14}"
        )
    click.echo(f"Page {result.number} of {result.total_pages}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: str) -> None:
    """Show details of an existing order."""
    tracking = container.order_tracking()
    order = run(tracking.get(order_id))
    dto = order_to_dto(order)

    click.echo(f"Order #{dto.short_id}  (status={dto.status})")
    click.echo(f"Phone:    {dto.customer_phone}")
    click.echo(f"Address:  {dto.delivery_address}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    print_order_table(dto.items)
    click.echo(f"  {'Order Total':<30} {dto.total:>29}")

    targets = ", ".join(s.value for s in tracking.allowed_targets(order)) or "none"
    click.echo(f"Next statuses: {targets}")


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option("--to", "new_status", required=True, type=_STATUS_CHOICES, help="New status.")
@click.pass_obj
def order_status(container: Container, order_id: str, new_status: str) -> None:
    """Change the status of an order."""
    tracking = container.order_tracking()
    try:
        target = parse_status(new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    order = run(tracking.set_status(order_id, target))
    click.echo(f"Order #{order.short_id} is now {order.status.value}.")
