"""File-backed local cache for the serialized cart.

The file holds a flat JSON object of string keys to string values.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import ParseError, PersistenceError
from storefront.domain.repository.cart_cache import CartCache


class JsonCartCache(CartCache):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def read(self, key: str) -> str | None:
        return self._load().get(key)

    def write(self, key: str, value: str) -> None:
        try:
            entries = self._load()
        except ParseError:
            entries = {}
        entries[key] = value
        self._persist(entries)

    def delete(self, key: str) -> None:
        try:
            entries = self._load()
        except ParseError:
            self._persist({})
            return
        if key in entries:
            del entries[key]
            self._persist(entries)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            entries = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ParseError(f"Cannot read cart cache: {exc}") from exc
        if not isinstance(entries, dict):
            raise ParseError("Cart cache is not a key-value object")
        return entries

    def _persist(self, entries: dict[str, str]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(entries) + "\n", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot write cart cache: {exc}") from exc
