"""Runtime configuration, read from ``STOREFRONT_*`` environment variables
or a ``.env`` file in the working directory."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    cart_cache_key: str = "storefront-cart"
    currency: str = "EGP"
    store_name: str = "Storefront"
    merchant_phone: str = ""
    status_policy: str = "strict"
    admin_email: str = "admin@example.com"
    admin_password: str = ""
    log_level: str = "WARNING"
    log_json: bool = False
