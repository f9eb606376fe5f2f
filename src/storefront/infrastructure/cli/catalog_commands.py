"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.catalog_filter import ALL_CATEGORIES
from storefront.application.dto import product_to_dto
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.cli.common import run


@click.command("categories")
@click.pass_obj
def catalog_categories(container: Container) -> None:
    """List product categories."""
    categories = run(container.catalog_repo.list_categories())
    if not categories:
        click.echo("No categories found.")
        return
    click.echo(f"{'ID':<34} {'Name':<24}")
    click.echo("-" * 58)
    for c in categories:
        click.echo(f"{c.id:<34} {c.name:<24}")


@click.command("list")
@click.option("--category", default=ALL_CATEGORIES, show_default=True, help="Category ID or 'all'.")
@click.pass_obj
def catalog_list(container: Container, category: str) -> None:
    """List products, optionally narrowed to one category."""
    view = container.catalog_filter()

    async def browse() -> None:
        await view.load_initial()
        if category != ALL_CATEGORIES:
            await view.select_category(category)

    run(browse())
    view.close()

    if not view.products:
        click.echo("No products in this category.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Category':<16} {'Price':>14}")
    click.echo("-" * 91)
    for product in view.products:
        dto = product_to_dto(product, view.categories)
        price = dto.price
        if dto.base_price:
            price = f"{dto.price} (was {dto.base_price}, -{dto.discount})"
        click.echo(f"{dto.id:<34} {dto.name:<24} {dto.category:<16} {price:>14}")
