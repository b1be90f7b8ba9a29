"""
Users module exceptions.
"""

from shared.exceptions import ValidationError


class DuplicateEmailError(ValidationError):
    """Raised when a profile is created for an email another profile already uses."""

    def __init__(self, email: str, existing_user_id: str):
        super().__init__(
            f"Email already in use: {email}",
            code="DUPLICATE_EMAIL",
            details={"email": email, "existing_user_id": existing_user_id},
        )
