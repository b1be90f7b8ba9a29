"""
Authentication module.

Handles bearer token verification, profile resolution and the
authorization guards route handlers call.

Public API:
- IAuthService: Interface for auth checks
- AuthService: Implementation over TokenVerifier + UserRepository
- TokenVerifier: Supabase JWT verification
- Identity, CurrentUser: Verified caller / resolved profile
- Denial, GuardResult, is_denial: Guard results
- Auth exceptions: InvalidTokenError, ExpiredTokenError, MissingTokenError
"""

from .interfaces import IAuthService
from .models import (
    CurrentUser,
    Denial,
    FORBIDDEN,
    GuardResult,
    Identity,
    JWTPayload,
    UNAUTHORIZED,
    is_denial,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)
from .service import AuthService
from .verifier import TokenVerifier, extract_bearer_token

__all__ = [
    # Interface
    "IAuthService",
    # Implementation
    "AuthService",
    "TokenVerifier",
    "extract_bearer_token",
    # Models
    "Identity",
    "CurrentUser",
    "JWTPayload",
    "Denial",
    "GuardResult",
    "UNAUTHORIZED",
    "FORBIDDEN",
    "is_denial",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
]
