"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

import uuid
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.catalog import Category, Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, categories_path: Path, products_path: Path) -> None:
        self._categories = JsonFile(categories_path)
        self._products = JsonFile(products_path)

    # --- Categories -----------------------------------------------------------

    async def list_categories(self) -> list[Category]:
        return [Category(id=raw["id"], name=raw["name"]) for raw in self._categories.load()]

    async def get_category(self, category_id: str) -> Category | None:
        for category in await self.list_categories():
            if category.id == category_id:
                return category
        return None

    async def save_category(self, category: Category) -> str:
        records = self._categories.load()
        category_id = category.id or uuid.uuid4().hex
        raw = {"id": category_id, "name": category.name}
        self._categories.persist(_upsert(records, raw))
        return category_id

    async def delete_category(self, category_id: str) -> None:
        records = self._categories.load()
        self._categories.persist([r for r in records if r["id"] != category_id])

    # --- Products -------------------------------------------------------------

    async def list_products(self, category_id: str | None = None) -> list[Product]:
        return [
            self._to_domain(raw)
            for raw in self._products.load()
            if category_id is None or raw["category_id"] == category_id
        ]

    async def get_product(self, product_id: str) -> Product | None:
        for raw in self._products.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    async def save_product(self, product: Product) -> str:
        records = self._products.load()
        product_id = product.id or uuid.uuid4().hex
        self._products.persist(_upsert(records, self._to_raw(product, product_id)))
        return product_id

    async def delete_product(self, product_id: str) -> None:
        records = self._products.load()
        self._products.persist([r for r in records if r["id"] != product_id])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product, product_id: str) -> dict:
        return {
            "id": product_id,
            "name": product.name,
            "description": product.description,
            "image_url": product.image_url,
            "category_id": product.category_id,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "base_price": str(product.base_price.amount) if product.base_price else None,
            "discount": str(product.discount) if product.discount is not None else None,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", DEFAULT_CURRENCY)
        base_price = raw.get("base_price")
        discount = raw.get("discount")
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            image_url=raw.get("image_url", ""),
            category_id=raw["category_id"],
            price=Money(Decimal(raw["price"]), currency),
            base_price=Money(Decimal(base_price), currency) if base_price else None,
            discount=Decimal(discount) if discount is not None else None,
        )


def _upsert(records: list[dict], raw: dict) -> list[dict]:
    for i, existing in enumerate(records):
        if existing["id"] == raw["id"]:
            records[i] = raw
            return records
    records.append(raw)
    return records
