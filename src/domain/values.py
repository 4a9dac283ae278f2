"""
Validated value objects - Age and Email.

An instance of either class is proof that its raw input passed validation.
The public factories are validate_age() and validate_email_syntax(); the
dataclasses re-run the same checks in __post_init__ so an unchecked value
can never be built by calling the constructor directly.
"""

import re
from dataclasses import dataclass

from .exceptions import ImplausibleAge, InvalidEmailFormat, NegativeAge, UnderageUser

MIN_AGE = 13
MAX_AGE = 120

# local-part@domain.tld, matched against the whole string
EMAIL_PATTERN = re.compile(r"[\w.]+@[\w.]+\.\w+")


def _check_age(raw: int) -> None:
    # Negative first: a negative value would also satisfy the minor check.
    if raw < 0:
        raise NegativeAge()
    if raw < MIN_AGE:
        raise UnderageUser()
    if raw > MAX_AGE:
        raise ImplausibleAge()


@dataclass(frozen=True)
class Age:
    """User age, inclusive range [13, 120]."""

    value: int

    def __post_init__(self) -> None:
        _check_age(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Email:
    """Syntactically valid email address, stored exactly as given."""

    value: str

    def __post_init__(self) -> None:
        if not EMAIL_PATTERN.fullmatch(self.value):
            raise InvalidEmailFormat()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"


def validate_age(raw: int) -> Age:
    """
    Validate a raw age.

    Raises:
        NegativeAge: raw < 0
        UnderageUser: 0 <= raw < 13
        ImplausibleAge: raw > 120
    """
    return Age(raw)


def validate_email_syntax(raw: str) -> Email:
    """
    Validate email syntax without any normalization.

    Raises:
        InvalidEmailFormat: raw does not match local-part@domain.tld
    """
    return Email(raw)
