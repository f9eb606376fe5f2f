"""Observer and cancellation primitives.

``Subscription`` is what every ``subscribe(...)`` call hands back; calling
``cancel()`` stops further notifications. ``CancellationToken`` travels
with an asynchronous request and is checked before its result is applied.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class CancellationToken:
    """Marks whether the result of an in-flight request is still wanted."""

    def __init__(self, label: str = "") -> None:
        self.label = label
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def is_live(self) -> bool:
        return not self._cancelled


class Subscription:
    """Handle returned by ``Observable.subscribe``. Cancelling is idempotent."""

    def __init__(self, on_cancel: Callable[[], None]) -> None:
        self._on_cancel: Callable[[], None] | None = on_cancel

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
            self._on_cancel = None

    @property
    def active(self) -> bool:
        return self._on_cancel is not None


class Observable(Generic[T]):
    """Minimal listener registry."""

    def __init__(self) -> None:
        self._listeners: list[Callable[[T], None]] = []

    def subscribe(self, listener: Callable[[T], None]) -> Subscription:
        self._listeners.append(listener)
        return Subscription(lambda: self._discard(listener))

    def emit(self, value: T) -> None:
        for listener in list(self._listeners):
            listener(value)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _discard(self, listener: Callable[[T], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
