"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional, Union
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from modules.users.models import UserProfile


class JWTPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    This matches the structure of Supabase Auth JWTs.
    """

    sub: str = Field(..., min_length=1, description="Subject (user ID)")
    email: Optional[str] = Field(None, description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    aud: str = Field(default="authenticated", description="Audience")
    role: str = Field(default="authenticated", description="User role")

    # Supabase-specific claims
    app_metadata: dict = Field(default_factory=dict)
    user_metadata: dict = Field(default_factory=dict)

    model_config = {"extra": "ignore"}


class Identity(BaseModel):
    """
    A verified caller.

    Only the token verifier produces these; they are never stored.
    """

    subject_id: str = Field(..., description="User ID from the identity provider")
    email: Optional[str] = Field(None, description="Email claim, if present")

    model_config = {"frozen": True}


class CurrentUser(UserProfile):
    """
    A resolved profile plus the verified subject id.

    `uid` is always the token's subject, even when the stored profile
    is sparse.
    """

    uid: str = Field(..., description="Verified subject id")


class Denial(BaseModel):
    """
    A guard's refusal to let a request through.

    Guards return this instead of raising. Route handlers check for it
    and hand it back as the response.
    """

    status_code: int = Field(..., description="HTTP status to respond with")
    error: str = Field(..., description="Stable error message")

    model_config = {"frozen": True}

    def to_dict(self) -> dict[str, str]:
        """Response body for the denial."""
        return {"error": self.error}

    def to_response(self) -> JSONResponse:
        """Render the denial as a JSON response."""
        return JSONResponse(content=self.to_dict(), status_code=self.status_code)


UNAUTHORIZED = Denial(status_code=401, error="Unauthorized")
FORBIDDEN = Denial(status_code=403, error="Forbidden - Admin access required")


# What require_auth / require_admin hand back
GuardResult = Union[CurrentUser, Denial]


def is_denial(result: object) -> bool:
    """True if a guard result is a Denial rather than a user."""
    return isinstance(result, Denial)
