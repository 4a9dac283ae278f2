"""
Domain exceptions - Closed error taxonomy for user registration.

Every failure the domain can report is one of the concrete classes below.
Each carries a human-readable message (the observable contract) and an
ErrorKind discriminant so callers never have to match on message text.
"""

from .ports import ErrorKind


class UserError(Exception):
    """Base class for user registration domain errors."""

    kind: ErrorKind | None = None
    default_message: str = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(UserError):
    """Raw input rejected by a validator."""

    pass


class NegativeAge(ValidationError):
    """Age below zero."""

    kind = ErrorKind.NEGATIVE_AGE
    default_message = "Age cannot be negative"


class UnderageUser(ValidationError):
    """Age in [0, 13)."""

    kind = ErrorKind.UNDERAGE_USER
    default_message = "Sorry but this service is unavailable for minor of 13 years old"


class ImplausibleAge(ValidationError):
    """Age above 120."""

    kind = ErrorKind.IMPLAUSIBLE_AGE
    default_message = "I don't think you can be immortal"


class InvalidEmailFormat(ValidationError):
    """Email does not match local-part@domain.tld."""

    kind = ErrorKind.INVALID_EMAIL_FORMAT
    default_message = "Invalid email"


class VerificationError(UserError):
    """Email verification step failed."""

    pass


class NotYetVerified(VerificationError):
    """Verification channel has not confirmed the address."""

    kind = ErrorKind.NOT_YET_VERIFIED
    default_message = "Email has not been verified yet"
