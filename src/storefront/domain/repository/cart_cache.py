"""Abstract local key-value cache holding the serialized cart."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CartCache(ABC):

    @abstractmethod
    def read(self, key: str) -> str | None:
        """Return the stored string for *key*, or None if absent."""

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing anything there."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Drop *key*; no error if it is absent."""
