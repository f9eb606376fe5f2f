"""CLI commands for the admin console: sign-in and catalog management."""

from __future__ import annotations

from decimal import Decimal

import click

from storefront.application.manage_categories import (
    AddCategoryHandler,
    DeleteCategoryHandler,
    RenameCategoryHandler,
)
from storefront.application.manage_products import (
    AddProductHandler,
    DeleteProductHandler,
    UpdateProductHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli.common import run

_DISCOUNT = click.FloatRange(min=0, max=100)


def _decimal(value: float | None) -> Decimal | None:
    return Decimal(str(value)) if value is not None else None


@click.command("login")
@click.option("--email", required=True, help="Operator email.")
@click.password_option("--password", confirmation_prompt=False)
@click.pass_context
def admin_login(ctx: click.Context, email: str, password: str) -> None:
    """Sign in to the admin console."""
    try:
        ctx.obj.identity.login(email, password)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    # Set by the admin group's auth watcher.
    operator = ctx.meta.get("operator")
    click.echo(f"Signed in as {operator.email}" if operator else "Sign-in did not take effect.")


@click.command("logout")
@click.pass_context
def admin_logout(ctx: click.Context) -> None:
    """Sign out of the admin console."""
    try:
        ctx.obj.identity.logout()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    operator = ctx.meta.get("operator")
    click.echo("Signed out." if operator is None else f"Still signed in as {operator.email}")


# --- Products -----------------------------------------------------------------


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--price", required=True, help="Price (base price when discounted).")
@click.option("--discount", type=_DISCOUNT, default=None, help="Discount percentage.")
@click.option("--description", default="", help="Product description.")
@click.option("--image-url", default="", help="Image URL.")
@click.pass_obj
def product_add(
    container: Container,
    name: str,
    category_id: str,
    price: str,
    discount: float | None,
    description: str,
    image_url: str,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(container.catalog_repo, container.settings.currency)
    product = run(
        handler.handle(
            name=name,
            category_id=category_id,
            price=price,
            description=description,
            image_url=image_url,
            discount=_decimal(discount),
        )
    )
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (base price when discounted).")
@click.option("--discount", type=_DISCOUNT, default=None, help="Discount percentage; 0 clears it.")
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("--image-url", default=None)
@click.option("--category", "category_id", default=None)
@click.pass_obj
def product_update(
    container: Container,
    product_id: str,
    price: str | None,
    discount: float | None,
    name: str | None,
    description: str | None,
    image_url: str | None,
    category_id: str | None,
) -> None:
    """Edit a product."""
    handler = UpdateProductHandler(container.catalog_repo, container.settings.currency)
    product = run(
        handler.handle(
            product_id=product_id,
            price=price,
            discount=_decimal(discount),
            name=name,
            description=description,
            image_url=image_url,
            category_id=category_id,
        )
    )
    click.echo(f"Product #{product_id} updated — price {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: str) -> None:
    """Delete a product from the catalog."""
    run(DeleteProductHandler(container.catalog_repo).handle(product_id))
    click.echo(f"Product #{product_id} deleted.")


# --- Categories ---------------------------------------------------------------


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.pass_obj
def category_add(container: Container, name: str) -> None:
    """Add a new category."""
    category = run(AddCategoryHandler(container.catalog_repo).handle(name))
    click.echo(f"Category #{category.id} '{category.name}' added")


@click.command("rename")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", required=True, help="New name.")
@click.pass_obj
def category_rename(container: Container, category_id: str, name: str) -> None:
    """Rename a category."""
    category = run(RenameCategoryHandler(container.catalog_repo).handle(category_id, name))
    click.echo(f"Category #{category_id} renamed to '{category.name}'")


@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.pass_obj
def category_delete(container: Container, category_id: str) -> None:
    """Delete a category (its products are kept)."""
    run(DeleteCategoryHandler(container.catalog_repo).handle(category_id))
    click.echo(f"Category #{category_id} deleted.")
