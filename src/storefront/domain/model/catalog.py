"""Catalog aggregates: Category and Product.

Products live independently of carts and orders. Admins add, reprice
and remove them; customers only read them.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

UNKNOWN_CATEGORY = "unknown"


@dataclass
class Category:
    """Pure lookup entity. Products reference it by id only."""

    id: str | None
    name: str

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        self.name = name.strip()


@dataclass
class Product:
    """A product in the catalog.

    ``price`` is always the effective selling price. When ``discount`` is
    set, ``base_price`` holds the undiscounted price shown struck through
    and ``price`` is derived from it.
    """

    id: str | None
    name: str
    description: str
    image_url: str
    category_id: str
    price: Money
    base_price: Money | None = None
    discount: Decimal | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str,
        category_id: str,
        price: Money,
        description: str = "",
        image_url: str = "",
        discount: Decimal | int | None = None,
    ) -> Product:
        """Create a new product.

        With a discount, *price* is taken as the base price and the
        effective price is computed from it.
        """
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        product = Product(
            id=None,
            name=name.strip(),
            description=description,
            image_url=image_url,
            category_id=category_id,
            price=price,
        )
        product.reprice(price, discount)
        return product

    # --- Mutations ------------------------------------------------------------

    def reprice(self, base_price: Money, discount: Decimal | int | None = None) -> None:
        """Set a new price, optionally discounted by a percentage.

        Existing cart entries and orders keep the price they captured.
        """
        if base_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")

        pct = Decimal(discount) if discount is not None else Decimal("0")
        if pct < 0 or pct > 100:
            raise ValidationError(f"Discount must be between 0 and 100, got {pct}")

        if pct > 0:
            self.base_price = base_price
            self.discount = pct
            self.price = base_price.percent_off(pct)
        else:
            self.base_price = None
            self.discount = None
            self.price = base_price

    # --- Computed properties --------------------------------------------------

    @property
    def is_discounted(self) -> bool:
        return self.discount is not None and self.discount > 0


def category_name(categories: list[Category], category_id: str) -> str:
    """Resolve a category name, tolerating orphaned references."""
    for category in categories:
        if category.id == category_id:
            return category.name
    return UNKNOWN_CATEGORY
