"""Application service: category-based catalog browsing.

Each selection re-queries the catalog repository; nothing is filtered
client side. Overlapping queries are not ordered, so every request
carries a CancellationToken. Starting a new request or closing the view
cancels the previous token, and results arriving on a cancelled token
are dropped. The category list is not tied to any selection and is
only discarded once the view is closed.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

import structlog

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.catalog import Category, Product, category_name
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.signals import CancellationToken

logger = structlog.get_logger(__name__)

ALL_CATEGORIES = "all"

T = TypeVar("T")


class CatalogFilter:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo
        self._token: CancellationToken | None = None
        self._closed = False
        self.categories: list[Category] = []
        self.products: list[Product] = []
        self.selected: str = ALL_CATEGORIES
        self.is_loading = False

    async def load_initial(self) -> bool:
        """Load categories and the unfiltered product list together.

        Categories are kept unless the view is closed; only the product
        half can be superseded by a later selection.
        """
        token = self._issue(ALL_CATEGORIES)
        if token is None:
            return False
        self.is_loading = True
        _, products = await asyncio.gather(
            self._load_categories(),
            self._guarded(token, self._catalog_repo.list_products()),
        )
        if products is None:
            return False
        self.products = products
        self.is_loading = False
        return True

    async def select_category(self, category_id: str) -> bool:
        """Replace the visible products with those of *category_id*.

        Returns False when the response was discarded because a newer
        selection (or teardown) superseded it.
        """
        token = self._issue(category_id)
        if token is None:
            return False
        self.is_loading = True
        scope = None if category_id == ALL_CATEGORIES else category_id
        products = await self._guarded(token, self._catalog_repo.list_products(scope))
        if products is None:
            return False
        self.selected = category_id
        self.products = products
        self.is_loading = False
        logger.debug("Catalog narrowed", category=category_id, count=len(products))
        return True

    def close(self) -> None:
        """Tear the view down; any in-flight result will be ignored."""
        self._closed = True
        if self._token is not None:
            self._token.cancel()

    def category_name(self, category_id: str) -> str:
        return category_name(self.categories, category_id)

    # --- Internal helpers -----------------------------------------------------

    def _issue(self, label: str) -> CancellationToken | None:
        if self._closed:
            logger.debug("Ignoring request on closed catalog view", category=label)
            return None
        if self._token is not None:
            self._token.cancel()
        self._token = CancellationToken(label)
        return self._token

    async def _load_categories(self) -> None:
        try:
            categories = await self._catalog_repo.list_categories()
        except PersistenceError as exc:
            if self._closed:
                return
            logger.error("Category query failed", error=str(exc))
            raise
        if self._closed:
            logger.debug("Discarding categories for closed catalog view")
            return
        self.categories = categories

    async def _guarded(self, token: CancellationToken, call: Awaitable[T]) -> T | None:
        try:
            result = await call
        except PersistenceError as exc:
            if token.is_cancelled:
                logger.debug("Dropping failure of superseded request", category=token.label)
                return None
            self.is_loading = False
            logger.error("Catalog query failed", category=token.label, error=str(exc))
            raise
        if token.is_cancelled:
            logger.debug("Discarding stale catalog response", category=token.label)
            return None
        return result
