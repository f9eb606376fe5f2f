"""Application service: Checkout use case.

Composes an Order from the cart, writes it through the order repository
and, only once the write has succeeded, clears the cart. A failed write
leaves the cart and its cache entry untouched so the customer can retry.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from storefront.application.cart_ledger import CartLedger
from storefront.application.dto import CheckoutReceipt
from storefront.application.order_message import build_message_link, format_order_message
from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        ledger: CartLedger,
        order_repo: OrderRepository,
        merchant_phone: str = "",
        store_name: str = "Storefront",
    ) -> None:
        self._ledger = ledger
        self._order_repo = order_repo
        self._merchant_phone = merchant_phone
        self._store_name = store_name

    async def handle(
        self,
        customer_phone: str,
        delivery_address: str | None = None,
        now: datetime | None = None,
    ) -> CheckoutReceipt:
        """Submit the current cart as a new order.

        Raises ValidationError before any write for an empty cart or a
        missing phone number, and PersistenceError if the write fails.
        """
        order = Order.compose(
            cart_items=self._ledger.items,
            customer_phone=customer_phone,
            delivery_address=delivery_address,
            now=now,
            currency=self._ledger.currency,
        )

        try:
            order.id = await self._order_repo.create_order(order)
        except PersistenceError as exc:
            logger.error("Order submission failed; cart kept for retry", error=str(exc))
            raise

        self._ledger.clear()
        logger.info(
            "Order submitted",
            order_id=order.id,
            total=str(order.total_amount),
            item_count=order.item_count,
        )

        message = format_order_message(order, self._store_name)
        link = build_message_link(message, self._merchant_phone) if self._merchant_phone else None

        return CheckoutReceipt(
            order_id=order.id,
            total=str(order.total_amount),
            message=message,
            message_link=link,
        )
