"""
Bearer token verification.

Validates Supabase access tokens carried in the Authorization header
and turns them into an Identity.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Optional, Protocol

import jwt
from pydantic import ValidationError

from shared.config import Settings, get_settings
from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import Identity, JWTPayload

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class HasHeaders(Protocol):
    """Anything carrying HTTP headers, e.g. a Starlette Request."""

    @property
    def headers(self) -> Mapping[str, str]: ...


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.

    Returns:
        The token, or None if the header is missing, uses another
        scheme, or carries no token.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


class TokenVerifier:
    """
    Verifies Supabase JWT access tokens.

    Stateless and safe to share across requests.
    """

    def __init__(
        self,
        secret: str,
        audience: str = "authenticated",
        algorithms: Sequence[str] = ("HS256",),
    ):
        self._secret = secret
        self._audience = audience
        self._algorithms = list(algorithms)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TokenVerifier":
        """Build a verifier from application settings."""
        settings = settings or get_settings()
        return cls(
            secret=settings.supabase_jwt_secret,
            audience=settings.jwt_audience,
            algorithms=settings.jwt_algorithms,
        )

    def decode_token(self, token: Optional[str]) -> Identity:
        """
        Validate a JWT token and return the identity it names.

        Raises:
            MissingTokenError: If no token was given
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed, wrongly signed,
                for another audience, or the server has no secret
        """
        if not token:
            raise MissingTokenError()

        if not self._secret:
            raise InvalidTokenError("Server authentication not configured")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=self._algorithms,
                audience=self._audience,
                options={"require": ["exp", "sub"]},
            )
            claims = JWTPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))
        except ValidationError as e:
            raise InvalidTokenError(f"Unexpected token claims: {e.error_count()} invalid")

        return Identity(subject_id=claims.sub, email=claims.email)

    async def verify(self, request: HasHeaders) -> Optional[Identity]:
        """
        Verify the bearer token on a request.

        Any failure, including unexpected faults, yields None. Nothing
        is retried.
        """
        token = extract_bearer_token(request.headers.get("authorization"))
        if token is None:
            return None

        try:
            return self.decode_token(token)
        except (ExpiredTokenError, InvalidTokenError) as e:
            logger.warning(f"Rejected bearer token: {e.message}")
        except Exception:
            logger.exception("Token verification failed unexpectedly")
        return None
