"""Application service: guards the admin console.

Access only depends on whether an operator is signed in; there are no
roles.
"""

from __future__ import annotations

from collections.abc import Callable

from storefront.domain.exceptions import AuthenticationError
from storefront.domain.repository.identity_provider import IdentityProvider, User
from storefront.domain.signals import Subscription


class AdminGate:

    def __init__(self, identity: IdentityProvider) -> None:
        self._identity = identity

    def require_user(self) -> User:
        user = self._identity.current_user()
        if user is None:
            raise AuthenticationError("Sign in to use the admin console")
        return user

    def watch(self, on_change: Callable[[User | None], None]) -> Subscription:
        """Report the current operator now, then on every auth change."""
        on_change(self._identity.current_user())
        return self._identity.subscribe(on_change)
