"""Application service: the Cart Ledger.

Wraps the Cart aggregate and writes the whole cart to the local cache
after every mutation, so a new session can pick up where the last one
stopped. A missing or unreadable cache entry yields an empty cart.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation

import structlog

from storefront.domain.exceptions import ParseError, ValidationError
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.catalog import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.cart_cache import CartCache

logger = structlog.get_logger(__name__)

DEFAULT_CART_KEY = "storefront-cart"


class CartLedger:

    def __init__(
        self,
        cache: CartCache,
        key: str = DEFAULT_CART_KEY,
        cart: Cart | None = None,
    ) -> None:
        self._cache = cache
        self._key = key
        self._cart = cart if cart is not None else Cart()

    @classmethod
    def restore(
        cls,
        cache: CartCache,
        key: str = DEFAULT_CART_KEY,
        currency: str = DEFAULT_CURRENCY,
    ) -> CartLedger:
        """Rebuild the ledger from the cache, falling back to an empty cart."""
        cart = Cart(currency=currency)
        try:
            raw = cache.read(key)
            if raw is not None:
                cart = deserialize_cart(raw, currency)
        except ParseError as exc:
            logger.warning("Discarding unreadable cached cart", key=key, error=str(exc))
        return cls(cache, key, cart)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> CartItem:
        item = self._cart.add(product, quantity)
        self._persist()
        logger.debug("Cart item added", product_id=product.id, quantity=quantity)
        return item

    def set_quantity(self, product_id: str, quantity: int) -> None:
        self._cart.set_quantity(product_id, quantity)
        self._persist()

    def remove(self, product_id: str) -> None:
        self._cart.remove(product_id)
        self._persist()

    def confirm_quantity(self, product: Product, new_quantity: int) -> int:
        """Apply a quantity chosen in a product detail view.

        The view starts from the quantity already in the cart. Because
        ``add`` is additive, only the difference is sent through it; an
        unchanged quantity writes nothing. Returns the applied delta.
        """
        if not isinstance(new_quantity, int) or new_quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        delta = new_quantity - self._cart.quantity_of(product.id)  # type: ignore[arg-type]
        if delta == 0:
            return 0
        self.add(product, delta)
        return delta

    def clear(self) -> None:
        """Empty the cart and purge its cache entry."""
        self._cart.clear()
        self._cache.delete(self._key)

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> list[CartItem]:
        return list(self._cart.items)

    @property
    def currency(self) -> str:
        return self._cart.currency

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def total_amount(self) -> Money:
        return self._cart.total_amount()

    def item_count(self) -> int:
        return self._cart.item_count()

    def quantity_of(self, product_id: str) -> int:
        return self._cart.quantity_of(product_id)

    # --- Internal helpers -----------------------------------------------------

    def _persist(self) -> None:
        self._cache.write(self._key, serialize_cart(self._cart))


# --- Serialization ------------------------------------------------------------


def serialize_cart(cart: Cart) -> str:
    return json.dumps(
        [
            {
                "product_id": item.product_id,
                "name": item.name,
                "price": str(item.price.amount),
                "currency": item.price.currency,
                "quantity": item.quantity,
                "image_url": item.image_url,
                "total": str(item.total.amount),
            }
            for item in cart.items
        ]
    )


def deserialize_cart(raw: str, currency: str = DEFAULT_CURRENCY) -> Cart:
    """Decode a cached cart.

    The cached ``total`` is ignored; it is recomputed from price and
    quantity.
    """
    try:
        records = json.loads(raw)
        if not isinstance(records, list):
            raise ParseError(f"Expected a list of cart items, got {type(records).__name__}")

        items: list[CartItem] = []
        seen: set[str] = set()
        for record in records:
            product_id = str(record["product_id"])
            quantity = record["quantity"]
            if not isinstance(quantity, int) or quantity < 1:
                raise ParseError(f"Invalid quantity {quantity!r} for product {product_id}")
            if product_id in seen:
                raise ParseError(f"Duplicate cart entry for product {product_id}")
            seen.add(product_id)
            items.append(
                CartItem(
                    product_id=product_id,
                    name=record["name"],
                    price=Money(Decimal(record["price"]), record.get("currency", currency)),
                    quantity=quantity,
                    image_url=record.get("image_url", ""),
                )
            )
    except ParseError:
        raise
    except (ValueError, KeyError, TypeError, InvalidOperation, ValidationError) as exc:
        raise ParseError(f"Corrupt cart cache: {exc}") from exc

    return Cart(items=items, currency=currency)
