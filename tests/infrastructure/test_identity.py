"""Tests for the session-file identity provider."""

import pytest

from storefront.domain.exceptions import AuthenticationError
from storefront.infrastructure.identity.file_identity_provider import FileIdentityProvider


def _provider(tmp_path, password: str = "s3cret") -> FileIdentityProvider:
    return FileIdentityProvider(tmp_path / "session.json", "admin@example.com", password)


class TestFileIdentityProvider:

    def test_signed_out_by_default(self, tmp_path):
        assert _provider(tmp_path).current_user() is None

    def test_login_persists_session(self, tmp_path):
        _provider(tmp_path).login("Admin@Example.com", "s3cret")
        user = _provider(tmp_path).current_user()
        assert user is not None
        assert user.email == "admin@example.com"

    def test_bad_password(self, tmp_path):
        with pytest.raises(AuthenticationError, match="Invalid"):
            _provider(tmp_path).login("admin@example.com", "wrong")

    def test_login_disabled_without_password(self, tmp_path):
        with pytest.raises(AuthenticationError, match="disabled"):
            _provider(tmp_path, password="").login("admin@example.com", "")

    def test_logout_notifies_subscribers(self, tmp_path):
        provider = _provider(tmp_path)
        seen: list = []
        subscription = provider.subscribe(seen.append)

        provider.login("admin@example.com", "s3cret")
        provider.logout()
        subscription.cancel()
        provider.login("admin@example.com", "s3cret")

        assert [u.email if u else None for u in seen] == ["admin@example.com", None]

    def test_unreadable_session_is_signed_out(self, tmp_path):
        (tmp_path / "session.json").write_text("{", encoding="utf-8")
        assert _provider(tmp_path).current_user() is None
