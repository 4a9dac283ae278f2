"""
User aggregate and the email typestate.

UserEmail is a two-case tagged variant: UnverifiedEmail and VerifiedEmail
both wrap the same validated Email but are distinct types with distinct
EmailState tags. Code that needs a verified address accepts VerifiedEmail
(or goes through User.verified_email) and can never be handed an
unverified one by accident.

Email Typestate (Forward-Only Transition)
=========================================

    UNVERIFIED -> VERIFIED   (grant_user after a successful verification)

There is no VERIFIED -> UNVERIFIED transition. The User's email field is
the only field that may be replaced after construction; every other field
is read-only once __init__ has run.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from .exceptions import NotYetVerified
from .ports import EmailState
from .values import Age, Email


@dataclass(frozen=True)
class UnverifiedEmail:
    """Email that has not been confirmed by its owner."""

    email: Email
    state: ClassVar[EmailState] = EmailState.UNVERIFIED

    def __str__(self) -> str:
        return str(self.email)


@dataclass(frozen=True)
class VerifiedEmail:
    """Email confirmed through the verification channel."""

    email: Email
    state: ClassVar[EmailState] = EmailState.VERIFIED

    def __str__(self) -> str:
        return str(self.email)


UserEmail = UnverifiedEmail | VerifiedEmail

_MUTABLE_FIELDS = frozenset({"email"})


@dataclass
class User:
    """
    Registered user.

    Built by create_user(); a new User always holds an UnverifiedEmail.
    Only `email` may be reassigned afterwards, and only forward.
    """

    name: str
    middle_name: str | None
    surname: str
    age: Age
    email: UserEmail

    def __post_init__(self) -> None:
        if not isinstance(self.email, UnverifiedEmail):
            raise ValueError("A new user must start with an unverified email")

    def __setattr__(self, field: str, value: Any) -> None:
        if field in self.__dict__:
            if field not in _MUTABLE_FIELDS:
                raise AttributeError(f"User.{field} is read-only")
            self._check_email_transition(value)
        object.__setattr__(self, field, value)

    def _check_email_transition(self, value: Any) -> None:
        if not isinstance(value, (UnverifiedEmail, VerifiedEmail)):
            raise TypeError(f"User.email must be a UserEmail, got {type(value).__name__}")
        if isinstance(self.email, VerifiedEmail) and isinstance(value, UnverifiedEmail):
            raise ValueError("A verified email cannot go back to unverified")

    @property
    def is_verified(self) -> bool:
        return self.email.state is EmailState.VERIFIED

    @property
    def verified_email(self) -> VerifiedEmail:
        """
        Return the verified email.

        Raises:
            NotYetVerified: If the email is still unverified
        """
        if isinstance(self.email, VerifiedEmail):
            return self.email
        raise NotYetVerified()


def get_fullname(user: User) -> str:
    """Join name, optional middle name and surname with single spaces."""
    parts = [user.name, user.middle_name, user.surname]
    return " ".join(part for part in parts if part is not None)
