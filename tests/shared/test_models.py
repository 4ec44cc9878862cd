"""
Tests for shared models.
"""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create_with_required_fields(self):
        """Should create user with only the ID."""
        user = AuthenticatedUser(id="user-123")
        assert user.id == "user-123"
        assert user.issued_at is None
        assert user.expires_at is None

    def test_all_fields(self):
        now = datetime.now(timezone.utc)
        user = AuthenticatedUser(id="user-123", issued_at=now, expires_at=now)
        assert user.issued_at == now
        assert user.expires_at == now

    def test_immutability(self):
        """Should be frozen/immutable."""
        user = AuthenticatedUser(id="user-123")
        with pytest.raises(ValidationError):
            user.id = "new-id"

    def test_extra_fields_ignored(self):
        """Should ignore extra fields."""
        user = AuthenticatedUser(id="user-123", email="x@example.com")  # type: ignore
        assert not hasattr(user, "email")
