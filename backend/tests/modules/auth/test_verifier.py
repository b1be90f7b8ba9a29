"""Tests for bearer token verification."""

import pytest
from unittest.mock import patch

from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from modules.auth.models import Identity
from modules.auth.verifier import TokenVerifier, extract_bearer_token

from helpers import TEST_JWT_SECRET, bearer_request, create_test_token, make_request


class TestExtractBearerToken:
    def test_bearer_header(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_missing_header(self):
        assert extract_bearer_token(None) is None
        assert extract_bearer_token("") is None

    def test_other_scheme(self):
        assert extract_bearer_token("Basic dXNlcjpwYXNz") is None
        assert extract_bearer_token("Token abc") is None

    def test_scheme_is_case_sensitive(self):
        assert extract_bearer_token("bearer abc") is None

    def test_empty_token(self):
        assert extract_bearer_token("Bearer ") is None
        assert extract_bearer_token("Bearer    ") is None


class TestDecodeToken:
    @pytest.fixture
    def verifier(self):
        return TokenVerifier(secret=TEST_JWT_SECRET)

    def test_valid_token(self, verifier):
        """Should decode a valid token into an Identity."""
        identity = verifier.decode_token(create_test_token(user_id="user-123"))
        assert identity == Identity(subject_id="user-123", email="test@example.com")

    def test_token_without_email(self, verifier):
        """Email is optional in the identity."""
        identity = verifier.decode_token(create_test_token(email=None))
        assert identity.email is None

    def test_expired_token(self, verifier):
        with pytest.raises(ExpiredTokenError):
            verifier.decode_token(create_test_token(expired=True))

    def test_malformed_token(self, verifier):
        with pytest.raises(InvalidTokenError):
            verifier.decode_token("not-a-valid-token")

    def test_wrong_secret(self, verifier):
        with pytest.raises(InvalidTokenError):
            verifier.decode_token(create_test_token(secret="wrong-secret"))

    def test_wrong_audience(self, verifier):
        with pytest.raises(InvalidTokenError):
            verifier.decode_token(create_test_token(audience="wrong-audience"))

    def test_missing_token(self, verifier):
        with pytest.raises(MissingTokenError):
            verifier.decode_token("")
        with pytest.raises(MissingTokenError):
            verifier.decode_token(None)

    def test_unconfigured_secret(self):
        """A server without a secret rejects every token."""
        with pytest.raises(InvalidTokenError, match="not configured"):
            TokenVerifier(secret="").decode_token(create_test_token())


class TestVerify:
    @pytest.fixture
    def verifier(self):
        return TokenVerifier(secret=TEST_JWT_SECRET)

    @pytest.mark.asyncio
    async def test_valid_request(self, verifier):
        identity = await verifier.verify(bearer_request(create_test_token(user_id="u1")))
        assert identity.subject_id == "u1"

    @pytest.mark.asyncio
    async def test_missing_header_returns_none(self, verifier):
        assert await verifier.verify(make_request()) is None

    @pytest.mark.asyncio
    async def test_wrong_scheme_skips_verification(self, verifier):
        """Non-bearer headers are rejected without decoding anything."""
        with patch.object(verifier, "decode_token") as mock_decode:
            result = await verifier.verify(make_request({"Authorization": "Basic abc"}))

        assert result is None
        mock_decode.assert_not_called()

    @pytest.mark.asyncio
    async def test_expired_token_returns_none(self, verifier):
        assert await verifier.verify(bearer_request(create_test_token(expired=True))) is None

    @pytest.mark.asyncio
    async def test_invalid_token_returns_none(self, verifier):
        assert await verifier.verify(bearer_request("garbage")) is None

    @pytest.mark.asyncio
    async def test_unexpected_fault_returns_none(self, verifier):
        """Provider faults fail closed instead of propagating."""
        with patch.object(verifier, "decode_token", side_effect=ConnectionError("down")):
            result = await verifier.verify(bearer_request(create_test_token()))

        assert result is None

    @pytest.mark.asyncio
    async def test_header_lookup_is_case_insensitive(self, verifier):
        request = make_request({"AUTHORIZATION": f"Bearer {create_test_token()}"})
        assert await verifier.verify(request) is not None


class TestFromSettings:
    @patch("modules.auth.verifier.get_settings")
    def test_uses_settings(self, mock_settings):
        """from_settings should read secret, audience and algorithms."""
        mock_settings.return_value.supabase_jwt_secret = TEST_JWT_SECRET
        mock_settings.return_value.jwt_audience = "authenticated"
        mock_settings.return_value.jwt_algorithms = ["HS256"]

        verifier = TokenVerifier.from_settings()

        assert verifier.decode_token(create_test_token()).subject_id == "test-user-123"
