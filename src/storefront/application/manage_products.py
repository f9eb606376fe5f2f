"""Application services: admin product management."""

from __future__ import annotations

from decimal import Decimal

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.catalog import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, catalog_repo: CatalogRepository, currency: str = DEFAULT_CURRENCY) -> None:
        self._catalog_repo = catalog_repo
        self._currency = currency

    async def handle(
        self,
        name: str,
        category_id: str,
        price: str,
        description: str = "",
        image_url: str = "",
        discount: Decimal | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        for existing in await self._catalog_repo.list_products():
            if existing.name.lower() == name.strip().lower():
                raise ValidationError(f"Product '{name}' already exists")

        if await self._catalog_repo.get_category(category_id) is None:
            raise EntityNotFoundError(f"Category '{category_id}' not found")

        product = Product.create(
            name=name,
            category_id=category_id,
            price=Money.of(price, self._currency),
            description=description,
            image_url=image_url,
            discount=discount,
        )
        product.id = await self._catalog_repo.save_product(product)
        logger.info("Product added", product_id=product.id, price=str(product.price))
        return product


class UpdateProductHandler:

    def __init__(self, catalog_repo: CatalogRepository, currency: str = DEFAULT_CURRENCY) -> None:
        self._catalog_repo = catalog_repo
        self._currency = currency

    async def handle(
        self,
        product_id: str,
        price: str | None = None,
        discount: Decimal | None = None,
        name: str | None = None,
        description: str | None = None,
        image_url: str | None = None,
        category_id: str | None = None,
    ) -> Product:
        """Edit a product.

        Carts and orders keep the price they captured; only new additions
        see the change.
        """
        product = await self._catalog_repo.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if price is not None or discount is not None:
            base = Money.of(price, self._currency) if price is not None else (
                product.base_price or product.price
            )
            product.reprice(base, discount if discount is not None else product.discount)
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            product.name = name.strip()
        if description is not None:
            product.description = description
        if image_url is not None:
            product.image_url = image_url
        if category_id is not None:
            product.category_id = category_id

        await self._catalog_repo.save_product(product)
        logger.info("Product updated", product_id=product_id, price=str(product.price))
        return product


class DeleteProductHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    async def handle(self, product_id: str) -> None:
        if await self._catalog_repo.get_product(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        await self._catalog_repo.delete_product(product_id)
        logger.info("Product deleted", product_id=product_id)
