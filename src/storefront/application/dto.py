"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.catalog import Category, Product, category_name
from storefront.domain.model.order import Order


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product card."""

    id: str
    name: str
    category: str
    price: str
    base_price: str | None  # shown struck through when discounted
    discount: str | None


@dataclass(frozen=True)
class OrderLineItemDTO:
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the operator."""

    id: str
    short_id: str
    status: str
    customer_phone: str
    delivery_address: str
    items: list[OrderLineItemDTO]
    item_count: int
    total: str
    created_at: str


@dataclass(frozen=True)
class CheckoutReceipt:
    """Output: what the customer sees after a successful checkout."""

    order_id: str
    total: str
    message: str
    message_link: str | None


def product_to_dto(product: Product, categories: list[Category]) -> ProductDTO:
    return ProductDTO(
        id=product.id or "",
        name=product.name,
        category=category_name(categories, product.category_id),
        price=str(product.price),
        base_price=str(product.base_price) if product.is_discounted else None,
        discount=f"{product.discount:g}%" if product.is_discounted else None,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id or "",
        short_id=order.short_id,
        status=order.status.value,
        customer_phone=order.customer_phone,
        delivery_address=order.delivery_address or "-",
        items=[
            OrderLineItemDTO(
                name=item.name,
                quantity=item.quantity,
                unit_price=str(item.price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        item_count=order.item_count,
        total=str(order.total_amount),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
