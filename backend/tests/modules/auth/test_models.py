import pytest
import json

from modules.auth.models import (
    FORBIDDEN,
    UNAUTHORIZED,
    CurrentUser,
    Denial,
    Identity,
    JWTPayload,
    is_denial,
)


class TestIdentity:
    def test_create_identity(self):
        identity = Identity(subject_id="user-123", email="test@example.com")
        assert identity.subject_id == "user-123"
        assert identity.email == "test@example.com"

    def test_email_is_optional(self):
        assert Identity(subject_id="user-123").email is None

    def test_identity_is_immutable(self):
        """Identity should be immutable."""
        identity = Identity(subject_id="user-123")
        with pytest.raises(Exception):  # Pydantic ValidationError
            identity.subject_id = "different-id"


class TestJWTPayload:
    def test_parse_jwt_payload(self):
        """Should parse JWT payload from dict."""
        data = {
            "sub": "user-123",
            "email": "test@example.com",
            "exp": 1704067200,
            "iat": 1704063600,
            "aud": "authenticated",
            "role": "authenticated",
        }
        payload = JWTPayload(**data)
        assert payload.sub == "user-123"
        assert payload.email == "test@example.com"

    def test_jwt_defaults(self):
        """JWTPayload should have sensible defaults."""
        payload = JWTPayload(sub="user-123", exp=1704067200, iat=1704063600)
        assert payload.aud == "authenticated"
        assert payload.role == "authenticated"
        assert payload.app_metadata == {}
        assert payload.user_metadata == {}

    def test_empty_subject_rejected(self):
        with pytest.raises(Exception):
            JWTPayload(sub="", exp=1704067200, iat=1704063600)

    def test_unknown_claims_ignored(self):
        payload = JWTPayload(sub="user-123", exp=1, iat=1, session_id="abc")
        assert not hasattr(payload, "session_id")


class TestCurrentUser:
    def test_profile_with_uid(self):
        user = CurrentUser(
            id="u1",
            uid="u1",
            email="a@x.com",
            created_at="2024-01-01T00:00:00+00:00",
            updated_at="2024-01-01T00:00:00+00:00",
        )
        assert user.uid == "u1"
        assert user.admin is False


class TestDenial:
    def test_constants(self):
        assert UNAUTHORIZED.status_code == 401
        assert UNAUTHORIZED.error == "Unauthorized"
        assert FORBIDDEN.status_code == 403
        assert FORBIDDEN.error == "Forbidden - Admin access required"

    def test_to_response(self):
        response = FORBIDDEN.to_response()
        assert response.status_code == 403
        assert json.loads(response.body) == {"error": "Forbidden - Admin access required"}

    def test_denial_is_immutable(self):
        with pytest.raises(Exception):
            UNAUTHORIZED.status_code = 200

    def test_is_denial(self):
        assert is_denial(Denial(status_code=401, error="Unauthorized"))
        assert not is_denial(None)
        assert not is_denial({"error": "Unauthorized"})
