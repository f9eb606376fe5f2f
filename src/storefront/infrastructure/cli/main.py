import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.cli.admin_commands import (
    admin_login,
    admin_logout,
    category_add,
    category_delete,
    category_rename,
    product_add,
    product_delete,
    product_update,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_adjust,
    cart_remove,
    cart_set,
    cart_show,
    checkout,
)
from storefront.infrastructure.cli.catalog_commands import catalog_categories, catalog_list
from storefront.infrastructure.cli.order_commands import order_list, order_show, order_status
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import configure_logging

_OPEN_ADMIN_COMMANDS = ("login", "logout")


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront — catalog, cart and admin console"""
    settings = Settings()
    configure_logging(settings)
    try:
        ctx.obj = build_container(settings)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage your cart."""


@cli.group()
@click.pass_context
def admin(ctx: click.Context) -> None:
    """Admin console (requires sign-in)."""
    gate = ctx.obj.admin_gate()
    subscription = gate.watch(lambda user: ctx.meta.update(operator=user))
    ctx.call_on_close(subscription.cancel)
    if ctx.invoked_subcommand in _OPEN_ADMIN_COMMANDS:
        return
    try:
        gate.require_user()
    except DomainException as exc:
        raise click.ClickException(str(exc))


@admin.group()
def orders() -> None:
    """Track orders."""


@admin.group()
def products() -> None:
    """Manage products."""


@admin.group()
def categories() -> None:
    """Manage categories."""


# Register subcommands
catalog.add_command(catalog_categories)
catalog.add_command(catalog_list)
cart.add_command(cart_add)
cart.add_command(cart_adjust)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
cli.add_command(checkout)
admin.add_command(admin_login)
admin.add_command(admin_logout)
orders.add_command(order_list)
orders.add_command(order_show)
orders.add_command(order_status)
products.add_command(product_add)
products.add_command(product_delete)
products.add_command(product_update)
categories.add_command(category_add)
categories.add_command(category_delete)
categories.add_command(category_rename)
