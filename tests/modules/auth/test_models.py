import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from modules.auth.models import JWTPayload, TokenResponse, User, UserRecord


class TestJWTPayload:
    def test_parse_jwt_payload(self):
        """Should parse JWT payload from dict."""
        payload = JWTPayload(**{"sub": "user-123", "exp": 1704067200, "iat": 1703980800})
        assert payload.sub == "user-123"
        assert payload.exp - payload.iat == 86400

    def test_rejects_empty_subject(self):
        with pytest.raises(ValidationError):
            JWTPayload(sub="", exp=1704067200, iat=1703980800)

    def test_ignores_unknown_claims(self):
        payload = JWTPayload(sub="user-123", exp=1, iat=0, role="admin")
        assert not hasattr(payload, "role")


class TestUserRecord:
    def test_to_public_drops_password_hash(self):
        """The public projection should never carry the hash."""
        record = UserRecord(
            id="user-123",
            email="test@example.com",
            password_hash="$2b$04$hash",
            name="Test User",
            created_at=datetime.now(timezone.utc),
        )
        user = record.to_public()

        assert isinstance(user, User)
        assert user.email == "test@example.com"
        assert user.name == "Test User"
        assert "password_hash" not in user.model_dump()

    def test_optional_fields(self):
        record = UserRecord(id="user-123", email="test@example.com", password_hash="x")
        assert record.name is None
        assert record.created_at is None


class TestTokenResponse:
    def test_serializes_token(self):
        assert TokenResponse(token="abc").model_dump() == {"token": "abc"}
