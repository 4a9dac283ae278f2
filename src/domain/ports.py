"""
Port interfaces - Protocol and tag definitions shared by the domain.

This module defines the interface (port) the domain requires from the
verification channel, plus the enums used as runtime tags.
"""

from enum import Enum
from typing import Protocol


class EmailState(str, Enum):
    """
    Typestate tag carried by a user's email.

    State Transitions (forward-only):
    - UNVERIFIED -> VERIFIED (verification channel confirmed the address)

    Terminal States:
    - VERIFIED: no further transitions, there is no way back to UNVERIFIED
    """

    UNVERIFIED = "UNVERIFIED"
    VERIFIED = "VERIFIED"


class ErrorKind(str, Enum):
    """Discriminant for every concrete domain error."""

    NEGATIVE_AGE = "negative_age"
    UNDERAGE_USER = "underage_user"
    IMPLAUSIBLE_AGE = "implausible_age"
    INVALID_EMAIL_FORMAT = "invalid_email_format"
    NOT_YET_VERIFIED = "not_yet_verified"


class EmailVerifier(Protocol):
    """Port interface for the email verification channel."""

    def is_verified(self, address: str) -> bool:
        """
        Report whether the address has been confirmed by its owner.

        Args:
            address: Syntactically valid email address

        Returns:
            True if the address is confirmed, False otherwise
        """
        ...
