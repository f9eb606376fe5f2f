"""Integration tests for the Checkout use case.

Uses in-memory fakes — no file I/O.
"""

import asyncio
from datetime import datetime, timezone
from urllib.parse import unquote

import pytest

from storefront.application.cart_ledger import DEFAULT_CART_KEY, CartLedger
from storefront.application.checkout import CheckoutHandler
from storefront.domain.exceptions import PersistenceError, ValidationError
from storefront.domain.model.catalog import Product
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, InMemoryCartCache


def _product(product_id: str, price: str) -> Product:
    return Product(
        id=product_id,
        name=f"Product {product_id}",
        description="",
        image_url=f"https://img/{product_id}.jpg",
        category_id="c1",
        price=Money.of(price),
    )


def _setup(merchant_phone: str = "+20 100 000 0000"):
    cache = InMemoryCartCache()
    ledger = CartLedger(cache)
    order_repo = FakeOrderRepository()
    handler = CheckoutHandler(ledger, order_repo, merchant_phone=merchant_phone)
    return handler, ledger, cache, order_repo


class TestCheckoutHappyPath:

    def test_creates_pending_order_with_total(self):
        handler, ledger, _, order_repo = _setup()
        ledger.add(_product("a", "50"), 2)
        ledger.add(_product("b", "15.25"), 1)

        receipt = asyncio.run(handler.handle("01001234567", "12 Nile St"))

        saved = asyncio.run(order_repo.get_order(receipt.order_id))
        assert saved.status == OrderStatus.PENDING
        assert saved.total_amount == Money.of("115.25")
        assert saved.customer_phone == "01001234567"
        assert saved.delivery_address == "12 Nile St"
        assert receipt.total == "115.25 EGP"

    def test_clears_cart_and_purges_cache(self):
        handler, ledger, cache, _ = _setup()
        ledger.add(_product("a", "50"))

        asyncio.run(handler.handle("0100"))

        assert ledger.is_empty
        assert DEFAULT_CART_KEY not in cache.entries

    def test_receipt_carries_message_link(self):
        handler, ledger, _, _ = _setup()
        ledger.add(_product("a", "50"), 2)

        receipt = asyncio.run(handler.handle("0100"))

        assert receipt.message_link.startswith("https://wa.me/201000000000?text=")
        assert "Product a × 2 = 100.00 EGP" in unquote(receipt.message_link)
        assert "Phone: 0100" in receipt.message

    def test_no_link_without_merchant_phone(self):
        handler, ledger, _, _ = _setup(merchant_phone="")
        ledger.add(_product("a", "50"))
        assert asyncio.run(handler.handle("0100")).message_link is None


class TestCheckoutFailures:

    def test_empty_cart_rejected_without_write(self):
        handler, _, cache, order_repo = _setup()

        with pytest.raises(ValidationError, match="empty cart"):
            asyncio.run(handler.handle("0100"))

        assert order_repo.writes == 0
        assert cache.writes == 0
        assert cache.deletes == 0

    def test_missing_phone_rejected_without_write(self):
        handler, ledger, cache, order_repo = _setup()
        ledger.add(_product("a", "50"))

        with pytest.raises(ValidationError, match="phone"):
            asyncio.run(handler.handle(""))

        assert order_repo.writes == 0
        assert DEFAULT_CART_KEY in cache.entries

    def test_failed_write_keeps_cart_for_retry(self):
        handler, ledger, cache, order_repo = _setup()
        ledger.add(_product("a", "50"), 2)
        cached_before = cache.entries[DEFAULT_CART_KEY]
        order_repo.fail_writes = True

        with pytest.raises(PersistenceError):
            asyncio.run(handler.handle("0100"))

        assert ledger.quantity_of("a") == 2
        assert cache.entries[DEFAULT_CART_KEY] == cached_before
        assert cache.deletes == 0

        order_repo.fail_writes = False
        receipt = asyncio.run(handler.handle("0100"))
        assert receipt.total == "100.00 EGP"
        assert ledger.is_empty


class TestOrderImmutability:

    def test_persisted_order_ignores_later_catalog_edits(self):
        handler, ledger, _, order_repo = _setup()
        product = _product("a", "50")
        ledger.add(product, 2)
        created_at = datetime(2026, 5, 1, 9, 30, tzinfo=timezone.utc)

        receipt = asyncio.run(handler.handle("0100", now=created_at))

        product.reprice(Money.of("999"))
        product.name = "Renamed"

        saved = asyncio.run(order_repo.get_order(receipt.order_id))
        assert saved.items[0].price == Money.of("50")
        assert saved.items[0].name == "Product a"
        assert saved.total_amount == Money.of("100")
        assert saved.created_at == created_at
