"""Identity provider backed by a session file.

A single operator account is configured through settings. Signing in
writes the session file; signing out removes it. Listeners registered
with ``subscribe`` are told about every change made through this object.
"""

from __future__ import annotations

import hashlib
import hmac
import json
from pathlib import Path

import structlog

from storefront.domain.exceptions import AuthenticationError, PersistenceError
from storefront.domain.repository.identity_provider import AuthListener, IdentityProvider, User
from storefront.domain.signals import Observable, Subscription

logger = structlog.get_logger(__name__)


class FileIdentityProvider(IdentityProvider):

    def __init__(self, session_path: Path, admin_email: str, admin_password: str) -> None:
        self._session_path = session_path
        self._admin_email = admin_email
        self._admin_password = admin_password
        self._changes: Observable[User | None] = Observable()

    def current_user(self) -> User | None:
        if not self._session_path.exists():
            return None
        try:
            raw = json.loads(self._session_path.read_text(encoding="utf-8"))
            return User(uid=raw["uid"], email=raw["email"])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Ignoring unreadable session file", error=str(exc))
            return None

    def subscribe(self, on_change: AuthListener) -> Subscription:
        return self._changes.subscribe(on_change)

    def login(self, email: str, password: str) -> User:
        if not self._admin_password:
            raise AuthenticationError(
                "Admin sign-in is disabled; set STOREFRONT_ADMIN_PASSWORD"
            )
        email_ok = hmac.compare_digest(email.strip().lower(), self._admin_email.lower())
        password_ok = hmac.compare_digest(password, self._admin_password)
        if not (email_ok and password_ok):
            logger.warning("Rejected admin sign-in", email=email)
            raise AuthenticationError("Invalid email or password")

        user = User(uid=hashlib.sha256(self._admin_email.lower().encode()).hexdigest()[:16],
                    email=self._admin_email)
        try:
            self._session_path.parent.mkdir(parents=True, exist_ok=True)
            self._session_path.write_text(
                json.dumps({"uid": user.uid, "email": user.email}), encoding="utf-8"
            )
        except OSError as exc:
            raise PersistenceError(f"Cannot write session: {exc}") from exc
        logger.info("Admin signed in", email=user.email)
        self._changes.emit(user)
        return user

    def logout(self) -> None:
        try:
            self._session_path.unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Cannot clear session: {exc}") from exc
        logger.info("Admin signed out")
        self._changes.emit(None)
