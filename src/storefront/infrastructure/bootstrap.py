"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Nothing here is a
module-level singleton: the CLI builds one ``Container`` per invocation
and passes it down.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.admin_gate import AdminGate
from storefront.application.cart_ledger import CartLedger
from storefront.application.catalog_filter import CatalogFilter
from storefront.application.checkout import CheckoutHandler
from storefront.application.order_tracking import OrderTrackingHandler
from storefront.domain.repository.cart_cache import CartCache
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.identity_provider import IdentityProvider
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.status_policy import TransitionPolicy, policy_for
from storefront.infrastructure.config import Settings
from storefront.infrastructure.identity.file_identity_provider import FileIdentityProvider
from storefront.infrastructure.persistence.json_cart_cache import JsonCartCache
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


@dataclass
class Container:
    settings: Settings
    catalog_repo: CatalogRepository
    order_repo: OrderRepository
    cart_cache: CartCache
    identity: IdentityProvider
    policy: TransitionPolicy

    def cart_ledger(self) -> CartLedger:
        return CartLedger.restore(
            self.cart_cache,
            key=self.settings.cart_cache_key,
            currency=self.settings.currency,
        )

    def checkout_handler(self, ledger: CartLedger) -> CheckoutHandler:
        return CheckoutHandler(
            ledger,
            self.order_repo,
            merchant_phone=self.settings.merchant_phone,
            store_name=self.settings.store_name,
        )

    def order_tracking(self) -> OrderTrackingHandler:
        return OrderTrackingHandler(self.order_repo, self.policy)

    def catalog_filter(self) -> CatalogFilter:
        return CatalogFilter(self.catalog_repo)

    def admin_gate(self) -> AdminGate:
        return AdminGate(self.identity)


def build_container(settings: Settings) -> Container:
    data_dir = settings.data_dir
    return Container(
        settings=settings,
        catalog_repo=JsonCatalogRepository(
            data_dir / "categories.json", data_dir / "products.json"
        ),
        order_repo=JsonOrderRepository(data_dir / "orders.json"),
        cart_cache=JsonCartCache(data_dir / "local_cache.json"),
        identity=FileIdentityProvider(
            data_dir / "session.json",
            admin_email=settings.admin_email,
            admin_password=settings.admin_password,
        ),
        policy=policy_for(settings.status_policy),
    )
