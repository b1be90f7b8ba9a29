"""
Authentication service implementation.

Composes the token verifier and the privileged user repository into the
checks route handlers run before touching data.
"""

import logging
from typing import Optional

from shared.database import AccessMode
from modules.users.models import UserProfile
from modules.users.repository import UserRepository

from .interfaces import IAuthService
from .models import (
    FORBIDDEN,
    UNAUTHORIZED,
    CurrentUser,
    GuardResult,
    Identity,
)
from .verifier import HasHeaders, TokenVerifier

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Holds no per-request state. Faults while verifying or resolving a
    caller never escape: they turn into None, False or a Denial, so an
    outage of the store or the identity provider cannot grant access.
    """

    def __init__(self, verifier: TokenVerifier, users: UserRepository):
        if users.access_mode is not AccessMode.PRIVILEGED:
            raise ValueError("AuthService needs a privileged UserRepository")
        self._verifier = verifier
        self._users = users

    async def verify_request(self, request: HasHeaders) -> Optional[Identity]:
        return await self._verifier.verify(request)

    async def resolve(self, identity: Optional[Identity]) -> Optional[UserProfile]:
        """Look up the profile keyed by the identity's subject id."""
        if identity is None:
            return None
        return await self._users.find_by_id(identity.subject_id)

    async def get_current_user(self, request: HasHeaders) -> Optional[CurrentUser]:
        """
        Verify the request and resolve its profile.

        The verified subject id is added as `uid`.
        """
        try:
            identity = await self.verify_request(request)
            profile = await self.resolve(identity)
        except Exception:
            logger.exception("Failed to resolve current user")
            return None

        if identity is None or profile is None:
            return None

        return CurrentUser.model_validate({**profile.model_dump(), "uid": identity.subject_id})

    async def is_authenticated(self, request: HasHeaders) -> bool:
        return await self.verify_request(request) is not None

    async def is_admin(self, request: HasHeaders) -> bool:
        try:
            user = await self.get_current_user(request)
        except Exception:
            logger.exception("Admin check failed")
            return False
        return user is not None and user.admin is True

    async def require_auth(self, request: HasHeaders) -> GuardResult:
        user = await self.get_current_user(request)
        if user is None:
            return UNAUTHORIZED
        return user

    async def require_admin(self, request: HasHeaders) -> GuardResult:
        user = await self.get_current_user(request)
        if user is None:
            return UNAUTHORIZED
        if not user.admin:
            logger.info(f"Denied admin access to user {user.uid}")
            return FORBIDDEN
        return user

    async def ensure_profile(
        self,
        identity: Identity,
        name: Optional[str] = None,
        image: Optional[str] = None,
    ) -> UserProfile:
        """
        Return the identity's profile, creating it on first sign-in.

        New profiles take their email from the identity and are never
        created as admins.
        """
        profile = await self.resolve(identity)
        if profile is not None:
            return profile

        logger.info(f"Bootstrapping profile for user {identity.subject_id}")
        return await self._users.create(
            identity.subject_id,
            {"email": identity.email, "name": name, "image": image},
        )
