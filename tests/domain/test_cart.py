"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Product
from storefront.domain.model.value_objects import Money


def _product(product_id: str = "x", price: str = "50", name: str = "Soap") -> Product:
    return Product(
        id=product_id,
        name=name,
        description="",
        image_url=f"https://img/{product_id}.jpg",
        category_id="c1",
        price=Money.of(price),
    )


class TestAdd:

    def test_new_entry(self):
        cart = Cart()
        item = cart.add(_product(), 2)
        assert item.quantity == 2
        assert item.total == Money.of("100")
        assert item.image_url == "https://img/x.jpg"

    @pytest.mark.parametrize("q1,q2", [(1, 1), (2, 3), (5, 10)])
    def test_merge_sums_quantities(self, q1, q2):
        cart = Cart()
        product = _product(price="12.50")
        cart.add(product, q1)
        cart.add(product, q2)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == q1 + q2
        assert cart.items[0].total == Money.of("12.50") * (q1 + q2)

    def test_merge_keeps_price_at_add_time(self):
        cart = Cart()
        product = _product(price="50")
        cart.add(product)
        product.reprice(Money.of("80"))
        cart.add(product)
        assert cart.items[0].price == Money.of("50")
        assert cart.items[0].total == Money.of("100")

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must not be zero"):
            Cart().add(_product(), 0)

    def test_negative_quantity_for_new_entry_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Cart().add(_product(), -1)

    def test_negative_delta_on_existing_entry(self):
        cart = Cart()
        cart.add(_product(), 3)
        cart.add(_product(), -2)
        assert cart.quantity_of("x") == 1

    def test_negative_delta_cannot_drop_below_one(self):
        cart = Cart()
        cart.add(_product(), 2)
        with pytest.raises(ValidationError, match="below one unit"):
            cart.add(_product(), -2)
        assert cart.quantity_of("x") == 2

    def test_entries_keep_insertion_order(self):
        cart = Cart()
        cart.add(_product("a"))
        cart.add(_product("b"))
        cart.add(_product("a"))
        assert [i.product_id for i in cart.items] == ["a", "b"]


class TestSetQuantityAndRemove:

    def test_overwrites_quantity(self):
        cart = Cart()
        cart.add(_product(), 2)
        cart.set_quantity("x", 7)
        assert cart.items[0].quantity == 7
        assert cart.items[0].total == Money.of("350")

    @pytest.mark.parametrize("quantity", [0, -1, -10])
    def test_non_positive_removes(self, quantity):
        cart = Cart()
        cart.add(_product(), 2)
        cart.set_quantity("x", quantity)
        assert cart.is_empty

    def test_unknown_product_is_a_noop(self):
        cart = Cart()
        cart.add(_product(), 2)
        cart.set_quantity("missing", 4)
        assert cart.item_count() == 2

    def test_remove_is_idempotent(self):
        cart = Cart()
        cart.add(_product("a"))
        cart.add(_product("b"))
        cart.remove("a")
        after_first = [(i.product_id, i.quantity) for i in cart.items]
        cart.remove("a")
        assert [(i.product_id, i.quantity) for i in cart.items] == after_first


class TestDerivedValues:

    def test_total_amount_is_sum_of_price_times_quantity(self):
        cart = Cart()
        cart.add(_product("a", "10.25"), 3)
        cart.add(_product("b", "4.00"), 2)
        expected = sum((i.price.amount * i.quantity for i in cart.items))
        assert cart.total_amount().amount == expected
        assert cart.total_amount() == Money.of("38.75")

    def test_empty_cart_totals(self):
        cart = Cart()
        assert cart.total_amount() == Money.zero()
        assert cart.item_count() == 0

    def test_item_count_sums_quantities(self):
        cart = Cart()
        cart.add(_product("a"), 3)
        cart.add(_product("b"), 2)
        assert cart.item_count() == 5

    def test_add_then_remove_scenario(self):
        cart = Cart()
        product = _product(price="50")
        cart.add(product, 2)
        cart.add(product, 1)
        assert cart.items[0].quantity == 3
        assert cart.items[0].total == Money.of("150")
        cart.remove("x")
        assert cart.is_empty
        assert cart.total_amount().amount == 0
