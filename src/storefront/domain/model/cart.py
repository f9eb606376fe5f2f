"""Cart aggregate — the customer's in-progress selection.

The cart holds one entry per distinct product. Each entry freezes the
product's name, price and image at the moment it was first added, so
later catalog edits (or deletions) never change what is in the cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.catalog import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money


@dataclass
class CartItem:
    """A single cart entry.

    ``total`` is derived on every read; it is never stored on its own.
    """

    product_id: str
    name: str
    price: Money  # unit price captured at add time
    quantity: int
    image_url: str = ""

    @property
    def total(self) -> Money:
        return self.price * self.quantity


def _check_int(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )


@dataclass
class Cart:
    """Ordered collection of cart entries keyed by product id."""

    items: list[CartItem] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> CartItem:
        """Merge *quantity* units of *product* into the cart.

        Additive: an existing entry grows by *quantity* and keeps its
        original unit price. A negative quantity is only accepted as a
        delta against an existing entry that stays at one unit or more.
        """
        _check_int(quantity)
        if quantity == 0:
            raise ValidationError("Quantity to add must not be zero")

        existing = self._find(product.id)
        if existing is not None:
            new_quantity = existing.quantity + quantity
            if new_quantity < 1:
                raise ValidationError(
                    f"Cannot reduce {existing.name} below one unit "
                    f"(have {existing.quantity}, change {quantity})"
                )
            existing.quantity = new_quantity
            return existing

        if quantity < 0:
            raise ValidationError("Quantity must be positive")

        item = CartItem(
            product_id=product.id,  # type: ignore[arg-type]
            name=product.name,
            price=product.price,
            quantity=quantity,
            image_url=product.image_url,
        )
        self.items.append(item)
        return item

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Overwrite an entry's quantity; non-positive removes it."""
        _check_int(quantity)
        if quantity <= 0:
            self.remove(product_id)
            return
        existing = self._find(product_id)
        if existing is None:
            return
        existing.quantity = quantity

    def remove(self, product_id: str) -> None:
        self.items = [item for item in self.items if item.product_id != product_id]

    def clear(self) -> None:
        self.items = []

    # --- Computed properties --------------------------------------------------

    def total_amount(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.price * item.quantity
        return result

    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def quantity_of(self, product_id: str) -> int:
        existing = self._find(product_id)
        return existing.quantity if existing is not None else 0

    @property
    def is_empty(self) -> bool:
        return not self.items

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: str | None) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None
