"""Tests for the file-backed cart cache."""

import pytest

from storefront.application.cart_ledger import CartLedger
from storefront.domain.exceptions import ParseError
from storefront.domain.model.catalog import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.json_cart_cache import JsonCartCache


def _product() -> Product:
    return Product("x", "Soap", "", "", "c1", Money.of("50"))


class TestJsonCartCache:

    def test_read_missing_file(self, tmp_path):
        assert JsonCartCache(tmp_path / "cache.json").read("k") is None

    def test_write_read_delete(self, tmp_path):
        cache = JsonCartCache(tmp_path / "nested" / "cache.json")
        cache.write("k", "v")
        cache.write("other", "w")
        assert cache.read("k") == "v"

        cache.delete("k")
        cache.delete("k")
        assert cache.read("k") is None
        assert cache.read("other") == "w"

    def test_corrupt_file_raises_parse_error(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("[1, 2", encoding="utf-8")
        with pytest.raises(ParseError):
            JsonCartCache(path).read("k")

    def test_write_replaces_corrupt_file(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("garbage", encoding="utf-8")
        cache = JsonCartCache(path)
        cache.write("k", "v")
        assert cache.read("k") == "v"


class TestLedgerOverFileCache:

    def test_cart_survives_a_new_session(self, tmp_path):
        path = tmp_path / "cache.json"
        CartLedger.restore(JsonCartCache(path)).add(_product(), 2)

        ledger = CartLedger.restore(JsonCartCache(path))
        assert ledger.quantity_of("x") == 2

    def test_corrupt_cache_gives_empty_cart(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text("not json", encoding="utf-8")
        assert CartLedger.restore(JsonCartCache(path)).is_empty
