"""Abstract repository for the catalog (categories and products).

Defined in the domain layer so the domain never depends on
infrastructure. Every call is a coroutine because the backing store is
remote in production.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.catalog import Category, Product


class CatalogRepository(ABC):

    @abstractmethod
    async def list_categories(self) -> list[Category]:
        """Return every category."""

    @abstractmethod
    async def list_products(self, category_id: str | None = None) -> list[Product]:
        """Return products, narrowed to *category_id* when given."""

    @abstractmethod
    async def get_product(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def get_category(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    async def save_category(self, category: Category) -> str:
        """Persist a new or updated category and return its ID."""

    @abstractmethod
    async def delete_category(self, category_id: str) -> None:
        """Remove a category. Products referencing it are left alone."""

    @abstractmethod
    async def save_product(self, product: Product) -> str:
        """Persist a new or updated product and return its ID."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        """Remove a product from the catalog."""
