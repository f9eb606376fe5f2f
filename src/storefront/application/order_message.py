"""Formatting of the order hand-off message sent to the merchant.

Pure functions: the message is derived from the Order alone, and the
deep link only wraps it. Delivery is best effort and never confirmed.
"""

from __future__ import annotations

import re
from urllib.parse import quote

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order

MESSAGE_LINK_BASE = "https://wa.me"


def format_order_message(order: Order, store_name: str = "Storefront") -> str:
    lines = [f"• {item.name} × {item.quantity} = {item.line_total}" for item in order.items]
    header = f"*New order from {store_name}*"
    if order.id:
        header += f" #{order.short_id}"

    return "\n".join(
        [
            header,
            "",
            "*Customer*",
            f"Phone: {order.customer_phone}",
            f"Address: {order.delivery_address or 'not provided'}",
            "",
            "*Items*",
            *lines,
            "",
            f"*Total: {order.total_amount}*",
        ]
    )


def build_message_link(message: str, merchant_phone: str) -> str:
    """Build a pre-filled messaging deep link for *merchant_phone*."""
    digits = re.sub(r"\D", "", merchant_phone or "")
    if not digits:
        raise ValidationError("Merchant phone number is not configured")
    return f"{MESSAGE_LINK_BASE}/{digits}?text={quote(message, safe='')}"
