"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

import click

from storefront.domain.exceptions import DomainException

T = TypeVar("T")


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Drive an async use case to completion, turning domain errors into
    user-facing CLI errors."""
    try:
        return asyncio.run(coro)
    except DomainException as exc:
        raise click.ClickException(str(exc))


def print_order_table(items) -> None:
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*60}")
    for item in items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*60}")
