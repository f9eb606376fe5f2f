"""Unit tests for the Order aggregate."""

from datetime import datetime, timezone

import pytest

from storefront.domain.exceptions import (
    EntityNotFoundError,
    IllegalTransitionError,
    ValidationError,
)
from storefront.domain.model.cart import CartItem
from storefront.domain.model.order import Order, OrderItem, OrderStatus
from storefront.domain.model.value_objects import Money
from storefront.domain.service.status_policy import (
    PermissiveTransitionPolicy,
    StrictTransitionPolicy,
)


def _cart_item(product_id: str = "x", price: str = "50", qty: int = 2) -> CartItem:
    return CartItem(
        product_id=product_id,
        name=f"Product {product_id}",
        price=Money.of(price),
        quantity=qty,
        image_url=f"https://img/{product_id}.jpg",
    )


class TestOrderCompose:

    def test_happy_path(self):
        now = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
        order = Order.compose(
            [_cart_item("a", "50", 2), _cart_item("b", "15.50", 1)],
            customer_phone=" 01001234567 ",
            delivery_address="12 Nile St",
            now=now,
        )
        assert order.id is None  # assigned by repository
        assert order.status == OrderStatus.PENDING
        assert order.created_at == now
        assert order.customer_phone == "01001234567"
        assert order.total_amount == Money.of("115.50")
        assert [i.quantity for i in order.items] == [2, 1]
        assert order.items[0].image == "https://img/a.jpg"

    def test_items_drop_cached_total(self):
        order = Order.compose([_cart_item()], customer_phone="0100")
        assert not hasattr(order.items[0], "total")
        assert order.items[0].line_total == Money.of("100")

    def test_address_is_optional(self):
        order = Order.compose([_cart_item()], customer_phone="0100", delivery_address="  ")
        assert order.delivery_address is None

    def test_empty_cart_rejected(self):
        with pytest.raises(ValidationError, match="empty cart"):
            Order.compose([], customer_phone="0100")

    def test_missing_phone_rejected(self):
        with pytest.raises(ValidationError, match="phone is required"):
            Order.compose([_cart_item()], customer_phone="   ")

    def test_items_are_snapshots(self):
        cart_item = _cart_item(qty=2)
        order = Order.compose([cart_item], customer_phone="0100")
        cart_item.quantity = 9
        assert order.items[0].quantity == 2
        assert order.total_amount == Money.of("100")

    def test_short_id(self):
        order = Order.compose([_cart_item()], customer_phone="0100")
        order.id = "abcdef123456"
        assert order.short_id == "ABCDEF12"


class TestOrderItem:

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            OrderItem(product_id="x", name="X", price=Money.of("5"), quantity=0)

    def test_bool_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            OrderItem(product_id="x", name="X", price=Money.of("5"), quantity=True)

    def test_line_total(self):
        item = OrderItem(product_id="x", name="X", price=Money.of("7.25"), quantity=4)
        assert item.line_total == Money.of("29.00")


class TestChangeStatus:

    def _order(self, status: OrderStatus = OrderStatus.PENDING) -> Order:
        order = Order.compose([_cart_item()], customer_phone="0100")
        order.status = status
        return order

    def test_same_status_is_a_noop(self):
        order = self._order(OrderStatus.PAID)
        assert order.change_status(OrderStatus.PAID, StrictTransitionPolicy()) is False

    def test_strict_forward_move(self):
        order = self._order()
        assert order.change_status(OrderStatus.PAID, StrictTransitionPolicy()) is True
        assert order.status == OrderStatus.PAID

    def test_strict_rejects_leaving_completed(self):
        order = self._order(OrderStatus.COMPLETED)
        with pytest.raises(IllegalTransitionError, match="from completed to pending"):
            order.change_status(OrderStatus.PENDING, StrictTransitionPolicy())
        assert order.status == OrderStatus.COMPLETED

    def test_permissive_allows_leaving_completed(self):
        order = self._order(OrderStatus.COMPLETED)
        order.change_status(OrderStatus.PENDING, PermissiveTransitionPolicy())
        assert order.status == OrderStatus.PENDING

    def test_rejected_move_is_a_validation_error_not_a_lookup_failure(self):
        order = self._order(OrderStatus.CANCELLED)
        with pytest.raises(ValidationError) as excinfo:
            order.change_status(OrderStatus.PAID, StrictTransitionPolicy())
        assert not isinstance(excinfo.value, EntityNotFoundError)
        assert order.status == OrderStatus.CANCELLED
