"""
Users module.

Stores user profiles keyed by the identity provider's subject id.

Public API:
- UserRepository: Profile access in privileged or restricted mode
- UserProfile: Stored profile
- UserCreate / UserUpdate: Write payloads
"""

from .models import UserProfile, UserCreate, UserUpdate
from .repository import UserRepository
from .exceptions import DuplicateEmailError

__all__ = [
    # Repository
    "UserRepository",
    # Models
    "UserProfile",
    "UserCreate",
    "UserUpdate",
    # Exceptions
    "DuplicateEmailError",
]
