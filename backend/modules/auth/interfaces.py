"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.users.models import UserProfile
from .models import CurrentUser, GuardResult, Identity
from .verifier import HasHeaders


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication and authorization checks.

    None of these methods raise on a bad or missing credential; failures
    come back as None, False or a Denial.
    """

    async def verify_request(self, request: HasHeaders) -> Optional[Identity]:
        """
        Verify the request's bearer token.

        Returns:
            Identity if the token is valid, None otherwise
        """
        ...

    async def resolve(self, identity: Optional[Identity]) -> Optional[UserProfile]:
        """
        Look up the stored profile for a verified identity.

        Returns:
            UserProfile if found, None otherwise
        """
        ...

    async def get_current_user(self, request: HasHeaders) -> Optional[CurrentUser]:
        """
        Verify the request and resolve its profile.

        Returns:
            The profile merged with the verified uid, or None
        """
        ...

    async def is_authenticated(self, request: HasHeaders) -> bool:
        """True iff the request carries a valid token."""
        ...

    async def is_admin(self, request: HasHeaders) -> bool:
        """True iff the request resolves to a profile with the admin flag."""
        ...

    async def require_auth(self, request: HasHeaders) -> GuardResult:
        """
        Require a resolvable profile.

        Returns:
            CurrentUser, or a 401 Denial
        """
        ...

    async def require_admin(self, request: HasHeaders) -> GuardResult:
        """
        Require an administrator.

        Returns:
            CurrentUser, a 401 Denial if no profile resolves, or a
            403 Denial if the profile is not an admin
        """
        ...
