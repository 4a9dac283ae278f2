"""
Domain layer - Pure business logic with zero framework imports.

This package contains the user registration validation flow: validated
value objects, the email typestate, and the registration service. It
defines its own port interface for the verification channel, so adapters
can be swapped without touching the state machine.
"""

from .exceptions import (
    ImplausibleAge,
    InvalidEmailFormat,
    NegativeAge,
    NotYetVerified,
    UnderageUser,
    UserError,
    ValidationError,
    VerificationError,
)
from .ports import EmailState, EmailVerifier, ErrorKind
from .registration import RegistrationService, create_user, grant_user, verify_email
from .user import UnverifiedEmail, User, UserEmail, VerifiedEmail, get_fullname
from .values import Age, Email, validate_age, validate_email_syntax

__all__ = [
    "Age",
    "Email",
    "EmailState",
    "EmailVerifier",
    "ErrorKind",
    "ImplausibleAge",
    "InvalidEmailFormat",
    "NegativeAge",
    "NotYetVerified",
    "RegistrationService",
    "UnderageUser",
    "UnverifiedEmail",
    "User",
    "UserEmail",
    "UserError",
    "ValidationError",
    "VerificationError",
    "VerifiedEmail",
    "create_user",
    "get_fullname",
    "grant_user",
    "validate_age",
    "validate_email_syntax",
    "verify_email",
]
