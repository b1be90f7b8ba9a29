"""
User profile repository.

Profiles live in the `users` collection with the subject id from the
identity provider as document id.
"""

import logging
from typing import Optional

from shared.repository import BaseRepository, DocumentInput, privileged
from .exceptions import DuplicateEmailError
from .models import UserProfile

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserProfile]):
    """
    Repository for user profiles.

    Email is not unique at the store level. find_by_email returns the
    first match when several profiles share an address; pass
    ensure_unique_email=True to create() to refuse a second profile
    for an address that is already taken.
    """

    model = UserProfile
    default_table = "users"

    async def create(
        self,
        user_id: str,
        data: DocumentInput,
        ensure_unique_email: bool = False,
    ) -> UserProfile:
        """
        Create a profile for a verified subject.

        Args:
            user_id: Subject id from the identity provider.
            data: Profile fields (email, name, image, ...).
            ensure_unique_email: Look up the email first and refuse duplicates.

        Returns:
            The stored profile.

        Raises:
            DuplicateEmailError: If ensure_unique_email is set and another
                profile already uses the email.
        """
        if ensure_unique_email:
            email = self._payload(data).get("email")
            existing = await self.find_by_email(email) if email else None
            if existing is not None and existing.id != user_id:
                raise DuplicateEmailError(email, existing.id)

        profile = await self._insert(data, document_id=user_id)
        logger.info(f"Created profile for user {user_id}")
        return profile

    async def find_by_email(self, email: str) -> Optional[UserProfile]:
        """
        Get the first profile with the given email.

        Returns:
            A matching profile, or None.
        """
        profiles = await self._select(filters={"email": email}, limit=1)
        return profiles[0] if profiles else None

    @privileged
    async def list_all(self) -> list[UserProfile]:
        """List every profile, in store order."""
        return await self._select()

    @privileged
    async def delete(self, user_id: str) -> None:
        """Delete a profile. Deleting a missing profile is a no-op."""
        await self._delete(user_id)
