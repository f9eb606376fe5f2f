"""Abstract identity collaborator used to gate the admin console."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

from storefront.domain.signals import Subscription


@dataclass(frozen=True)
class User:
    uid: str
    email: str


AuthListener = Callable[["User | None"], None]


class IdentityProvider(ABC):

    @abstractmethod
    def current_user(self) -> User | None:
        """Return the signed-in operator, or None."""

    @abstractmethod
    def subscribe(self, on_change: AuthListener) -> Subscription:
        """Call *on_change* on every sign-in or sign-out until cancelled."""

    @abstractmethod
    def login(self, email: str, password: str) -> User:
        """Sign an operator in. Raises AuthenticationError on bad credentials."""

    @abstractmethod
    def logout(self) -> None:
        """Sign the current operator out."""
