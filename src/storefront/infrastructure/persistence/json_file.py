"""Shared file helpers for the JSON-backed stores."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from storefront.domain.exceptions import PersistenceError


class JsonFile:
    """A JSON document on disk, created with *default* on first use."""

    def __init__(self, file_path: Path, default: str = "[]") -> None:
        self.file_path = file_path
        self._default = default

    def load(self) -> Any:
        self._ensure_file()
        try:
            return json.loads(self.file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read {self.file_path.name}: {exc}") from exc

    def persist(self, data: Any) -> None:
        try:
            self.file_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self.file_path.name}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self.file_path.exists():
            return
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(self._default, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot create {self.file_path.name}: {exc}") from exc
