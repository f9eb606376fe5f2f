"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    async def create_order(self, order: Order) -> str:
        """Persist a new order and return the ID assigned to it."""

    @abstractmethod
    async def get_order(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    async def update_order_status(self, order_id: str, status: OrderStatus) -> None:
        """Overwrite the status of an existing order."""

    @abstractmethod
    async def list_orders(self) -> list[Order]:
        """Return every order, newest first."""
