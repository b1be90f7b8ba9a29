"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Entity-specific models should stay in their respective module directories.
"""

from datetime import datetime
from pydantic import BaseModel, Field


# Fields owned by the access layer; callers never get to set them
RESERVED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class Document(BaseModel):
    """
    A stored document: a flat field map plus its id and timestamps.

    Extra fields are kept so a document read back from the store
    carries everything that was written, not only the declared fields.
    """

    id: str = Field(..., description="Document ID")
    created_at: datetime = Field(..., description="Set once when the document is created")
    updated_at: datetime = Field(..., description="Refreshed on every write")

    model_config = {"extra": "allow"}
