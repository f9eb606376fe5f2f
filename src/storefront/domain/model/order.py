"""Order aggregate — an immutable snapshot of a submitted cart.

Line items, total and creation time are fixed at composition. The only
field that changes afterwards is ``status``, and only through
``change_status`` which consults a transition policy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartItem, _check_int
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money

if TYPE_CHECKING:
    from storefront.domain.service.status_policy import TransitionPolicy


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    IN_DELIVERY = "in_delivery"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.COMPLETED, OrderStatus.CANCELLED)


@dataclass(frozen=True)
class OrderItem:
    """Snapshot of one cart entry at submission time.

    Independent of the catalog: editing or deleting the product later
    does not touch it.
    """

    product_id: str
    name: str
    price: Money
    quantity: int
    image: str = ""

    def __post_init__(self) -> None:
        _check_int(self.quantity)
        if self.quantity <= 0:
            raise ValidationError("Order item quantity must be positive")

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity


@dataclass
class Order:
    """Aggregate root for submitted orders.

    Use ``Order.compose()`` for new orders. The ``__init__`` stays plain so
    repositories can reconstitute persisted orders without re-validating.
    """

    id: str | None
    items: tuple[OrderItem, ...]
    total_amount: Money
    customer_phone: str
    delivery_address: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def compose(
        cart_items: list[CartItem],
        customer_phone: str,
        delivery_address: str | None = None,
        now: datetime | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> Order:
        """Build an order from a cart snapshot, enforcing checkout rules."""
        if not cart_items:
            raise ValidationError("Cannot check out an empty cart")

        if not customer_phone or not customer_phone.strip():
            raise ValidationError("Customer phone is required")

        items = tuple(
            OrderItem(
                product_id=item.product_id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
                image=item.image_url,
            )
            for item in cart_items
        )

        # Recomputed from price and quantity, never from CartItem.total
        total = Money.zero(currency)
        for item in items:
            total = total + item.line_total

        address = delivery_address.strip() if delivery_address else None

        return Order(
            id=None,
            items=items,
            total_amount=total,
            customer_phone=customer_phone.strip(),
            delivery_address=address or None,
            status=OrderStatus.PENDING,
            created_at=now or datetime.now(timezone.utc),
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus, policy: TransitionPolicy) -> bool:
        """Move to *new_status* if *policy* allows it.

        Returns False when the order already has that status (nothing to
        write). Raises IllegalTransitionError otherwise.
        """
        if new_status == self.status:
            return False
        policy.check(self.status, new_status)
        self.status = new_status
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def short_id(self) -> str:
        return (self.id or "")[:8].upper()
