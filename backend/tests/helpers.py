"""
Token and request builders shared by the test modules.
"""

from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT
from starlette.requests import Request


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: Optional[str] = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    audience: str = "authenticated",
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token, or None to leave it out
        expired: If True, creates an expired token
        secret: Signing secret
        audience: Audience claim

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "aud": audience,
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    if email is not None:
        payload["email"] = email
    return jwt.encode(payload, secret, algorithm="HS256")


def make_request(headers: Optional[dict[str, str]] = None) -> Request:
    """Build a bare Starlette request carrying the given headers."""
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    return Request({"type": "http", "method": "GET", "path": "/", "headers": raw_headers})


def bearer_request(token: str) -> Request:
    """Build a request with an Authorization: Bearer header."""
    return make_request({"Authorization": f"Bearer {token}"})
