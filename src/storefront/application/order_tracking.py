"""Application service: admin order tracking.

Loads the order list and applies status changes. After every successful
change the whole list is reloaded rather than patched in place. When a
write fails the previously loaded list is kept as it was.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.status_policy import TransitionPolicy

logger = structlog.get_logger(__name__)

ORDERS_PER_PAGE = 10


class OrderTrackingHandler:

    def __init__(self, order_repo: OrderRepository, policy: TransitionPolicy) -> None:
        self._order_repo = order_repo
        self._policy = policy
        self.orders: list[Order] = []

    async def load(self) -> list[Order]:
        self.orders = await self._order_repo.list_orders()
        return self.orders

    async def get(self, order_id: str) -> Order:
        order = await self._order_repo.get_order(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order

    async def set_status(self, order_id: str, new_status: OrderStatus) -> Order:
        """Change an order's status, then reload the order list."""
        order = await self.get(order_id)
        previous = order.status

        if not order.change_status(new_status, self._policy):
            logger.info("Order status unchanged", order_id=order_id, status=previous.value)
            return order

        await self._order_repo.update_order_status(order_id, new_status)
        logger.info(
            "Order status updated",
            order_id=order_id,
            previous=previous.value,
            status=new_status.value,
            policy=self._policy.name,
        )
        await self.load()
        return order

    def allowed_targets(self, order: Order) -> list[OrderStatus]:
        return self._policy.allowed_targets(order.status)


# --- Filtering and pagination -------------------------------------------------


@dataclass(frozen=True)
class OrderFilter:
    """Criteria for narrowing the order list. Empty fields match anything."""

    status: OrderStatus | None = None
    phone: str = ""
    address: str = ""
    date_from: date | None = None
    date_to: date | None = None

    def matches(self, order: Order) -> bool:
        if self.status is not None and order.status != self.status:
            return False
        if self.phone and self.phone not in order.customer_phone:
            return False
        if self.address and self.address.lower() not in (order.delivery_address or "").lower():
            return False
        created = order.created_at.date()
        if self.date_from is not None and created < self.date_from:
            return False
        if self.date_to is not None and created > self.date_to:
            return False
        return True


@dataclass(frozen=True)
class Page:
    items: list[Order]
    number: int
    per_page: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self.per_page))


def filter_orders(orders: list[Order], criteria: OrderFilter) -> list[Order]:
    return [order for order in orders if criteria.matches(order)]


def paginate(orders: list[Order], page: int = 1, per_page: int = ORDERS_PER_PAGE) -> Page:
    if page < 1:
        raise ValidationError("Page number must be at least 1")
    if per_page < 1:
        raise ValidationError("Page size must be at least 1")
    start = (page - 1) * per_page
    return Page(
        items=orders[start:start + per_page],
        number=page,
        per_page=per_page,
        total_items=len(orders),
    )
