"""Application services: admin category management.

Deleting a category never touches products; products left pointing at a
removed category are shown under "unknown".
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.catalog import Category
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = structlog.get_logger(__name__)


class AddCategoryHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    async def handle(self, name: str) -> Category:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        category = Category(id=None, name=name.strip())
        category.id = await self._catalog_repo.save_category(category)
        logger.info("Category added", category_id=category.id, name=category.name)
        return category


class RenameCategoryHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    async def handle(self, category_id: str, name: str) -> Category:
        category = await self._catalog_repo.get_category(category_id)
        if category is None:
            raise EntityNotFoundError(f"Category '{category_id}' not found")
        category.rename(name)
        await self._catalog_repo.save_category(category)
        return category


class DeleteCategoryHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    async def handle(self, category_id: str) -> None:
        if await self._catalog_repo.get_category(category_id) is None:
            raise EntityNotFoundError(f"Category '{category_id}' not found")
        await self._catalog_repo.delete_category(category_id)
        logger.info("Category deleted", category_id=category_id)
