"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    async def create_order(self, order: Order) -> str:
        orders = self._file.load()
        order_id = uuid.uuid4().hex
        orders.append(self._to_raw(order, order_id))
        self._file.persist(orders)
        return order_id

    async def get_order(self, order_id: str) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    async def update_order_status(self, order_id: str, status: OrderStatus) -> None:
        orders = self._file.load()
        for raw in orders:
            if raw["id"] == order_id:
                # Only the status field is rewritten; the snapshot stays as is
                raw["status"] = status.value
                self._file.persist(orders)
                return
        raise EntityNotFoundError(f"Order #{order_id} not found")

    async def list_orders(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._file.load()]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order, order_id: str) -> dict:
        return {
            "id": order_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "customer_phone": order.customer_phone,
            "delivery_address": order.delivery_address,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.name,
                    "price": str(item.price.amount),
                    "quantity": item.quantity,
                    "image": item.image,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        items = tuple(
            OrderItem(
                product_id=i["product_id"],
                name=i["name"],
                price=Money(Decimal(i["price"]), currency),
                quantity=i["quantity"],
                image=i.get("image", ""),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            customer_phone=raw.get("customer_phone", ""),
            delivery_address=raw.get("delivery_address"),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
