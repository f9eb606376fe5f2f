"""Unit tests for the catalog model: discount pricing and category lookup."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.catalog import Category, Product, category_name
from storefront.domain.model.value_objects import Money


class TestProductPricing:

    def test_plain_price(self):
        product = Product.create("Serum", "c1", Money.of("120"))
        assert product.price == Money.of("120")
        assert product.base_price is None
        assert not product.is_discounted

    def test_discount_derives_price_from_base(self):
        product = Product.create("Serum", "c1", Money.of("200"), discount=25)
        assert product.base_price == Money.of("200")
        assert product.price == Money.of("150.00")
        assert product.is_discounted

    def test_discount_rounds_to_cents(self):
        product = Product.create("Mask", "c1", Money.of("33.33"), discount=Decimal("10"))
        assert product.price == Money.of("30.00")

    def test_zero_discount_clears_base_price(self):
        product = Product.create("Serum", "c1", Money.of("200"), discount=25)
        product.reprice(Money.of("180"), 0)
        assert product.price == Money.of("180")
        assert product.base_price is None
        assert product.discount is None

    @pytest.mark.parametrize("discount", [-1, 101])
    def test_out_of_range_discount_rejected(self, discount):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Product.create("Serum", "c1", Money.of("200"), discount=discount)

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            Product.create("Serum", "c1", Money.of("0"))

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Product.create("  ", "c1", Money.of("10"))


class TestCategoryLookup:

    def test_known_category(self):
        assert category_name([Category("c1", "Skin")], "c1") == "Skin"

    def test_orphaned_category_is_unknown(self):
        assert category_name([Category("c1", "Skin")], "gone") == "unknown"

    def test_rename_rejects_blank(self):
        with pytest.raises(ValidationError):
            Category("c1", "Skin").rename(" ")
