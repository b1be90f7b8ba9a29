"""
Error response models.

Body of every JSON error response: guard denials carry only `error`,
application exceptions add their `code`.
"""

from typing import Optional
from pydantic import BaseModel

from shared.exceptions import FoodOrderError


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    code: Optional[str] = None

    @classmethod
    def from_exception(cls, exc: FoodOrderError) -> "ErrorResponse":
        """Build the body from the exception's to_dict(); details stay out."""
        return cls.model_validate(exc.to_dict())
