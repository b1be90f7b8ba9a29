"""
Users module data models.
"""

from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from shared.models import Document


class UserProfile(Document):
    """
    A stored user profile.

    The document id is the identity provider's subject id and never
    changes. Profiles may be sparse, so only `admin` has a default.
    """

    email: Optional[str] = Field(None, description="Email address")
    name: Optional[str] = Field(None, description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    admin: bool = Field(default=False, description="Administrator flag")


class UserCreate(BaseModel):
    """Fields for a new profile, written at sign-up."""

    email: EmailStr = Field(..., description="Email address")
    name: Optional[str] = Field(None, description="Display name")
    image: Optional[str] = Field(None, description="Avatar URL")
    admin: bool = Field(default=False, description="Administrator flag")

    model_config = {"extra": "allow"}


class UserUpdate(BaseModel):
    """Partial profile update. Only fields that were set are written."""

    email: Optional[EmailStr] = None
    name: Optional[str] = None
    image: Optional[str] = None
    admin: Optional[bool] = None

    model_config = {"extra": "allow"}
