"""
Registration domain service - user construction and email granting.

Flow
====

    raw inputs -> validate_age -> validate_email_syntax -> User(UNVERIFIED)
    User(UNVERIFIED) -> grant_user -> verify_email -> User(VERIFIED)

Construction is atomic: either every validator passes and a fully valid
User is returned, or the first failure is raised and no User exists. Age
is validated before email so that the reported error is deterministic
when both inputs are bad.

Verification is delegated to an EmailVerifier port. The domain owns the
state machine; the port only answers "is this address confirmed?".
"""

import logging
from dataclasses import dataclass

from .exceptions import NotYetVerified
from .ports import EmailVerifier
from .user import UnverifiedEmail, User, VerifiedEmail
from .values import validate_age, validate_email_syntax

logger = logging.getLogger(__name__)


def create_user(
    email: str,
    age: int,
    name: str,
    surname: str,
    middle_name: str | None = None,
) -> User:
    """
    Build a User from raw inputs.

    Names are stored verbatim, without validation.

    Raises:
        NegativeAge, UnderageUser, ImplausibleAge: If age is rejected
        InvalidEmailFormat: If age is valid but email is not
    """
    valid_age = validate_age(age)
    valid_email = validate_email_syntax(email)
    return User(
        name=name,
        middle_name=middle_name,
        surname=surname,
        age=valid_age,
        email=UnverifiedEmail(valid_email),
    )


def verify_email(email: UnverifiedEmail, verifier: EmailVerifier) -> VerifiedEmail:
    """
    Promote an unverified email once the verification channel confirms it.

    Returns:
        VerifiedEmail wrapping the same Email, unchanged

    Raises:
        TypeError: If email is not an UnverifiedEmail
        NotYetVerified: If the verifier does not confirm the address
    """
    if not isinstance(email, UnverifiedEmail):
        raise TypeError(f"verify_email expects an UnverifiedEmail, got {type(email).__name__}")
    if not verifier.is_verified(str(email.email)):
        raise NotYetVerified()
    return VerifiedEmail(email.email)


def grant_user(user: User, verifier: EmailVerifier) -> None:
    """
    Verify the user's email in place.

    No-op when the email is already verified, so calling it twice is safe.
    On failure the error propagates and user.email stays unverified.

    Raises:
        NotYetVerified: If the verifier does not confirm the address
    """
    if isinstance(user.email, UnverifiedEmail):
        user.email = verify_email(user.email, verifier)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Holds the verification port and logs each lifecycle step.
    """

    verifier: EmailVerifier

    def create_user(
        self,
        email: str,
        age: int,
        name: str,
        surname: str,
        middle_name: str | None = None,
    ) -> User:
        """Build a User; see create_user()."""
        user = create_user(email, age, name, surname, middle_name)
        logger.info("User created: email=%s age=%s", user.email, user.age)
        return user

    def grant_user(self, user: User) -> None:
        """Verify the user's email; see grant_user()."""
        if user.is_verified:
            logger.debug("Email %s already verified, nothing to grant", user.email)
            return

        try:
            grant_user(user, self.verifier)
        except NotYetVerified:
            logger.warning("Email %s has not been verified yet", user.email)
            raise

        logger.info("Email %s verified", user.email)
