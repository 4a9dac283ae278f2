"""
Command-line entry point.

Builds one user from sample inputs (overridable with flags), prints a
welcome line, attempts to verify the email and, if that succeeds, prints
a confirmation line. Domain errors are reported on stderr and mapped to a
non-zero exit status, as are invalid settings.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError as PydanticValidationError

from src.app.dependencies import get_registration_service
from src.config.settings import Settings, get_settings
from src.domain.exceptions import UserError
from src.domain.user import get_fullname

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_CONFIG_ERROR = 2

# Sample inputs
DEFAULT_EMAIL = "foo@ok.com"
DEFAULT_AGE = 22
DEFAULT_NAME = "Luca"
DEFAULT_SURNAME = "Rossi"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(level=settings.log_level, format=settings.log_format)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser; defaults are the sample inputs."""
    parser = argparse.ArgumentParser(
        prog="typestate-user",
        description="Register a user and verify their email.",
    )
    parser.add_argument("--email", default=DEFAULT_EMAIL)
    parser.add_argument("--age", type=int, default=DEFAULT_AGE)
    parser.add_argument("--name", default=DEFAULT_NAME)
    parser.add_argument("--surname", default=DEFAULT_SURNAME)
    parser.add_argument("--middle-name", default=None)
    return parser


def run(args: argparse.Namespace, settings: Settings) -> None:
    """
    Register and grant one user.

    Raises:
        UserError: Propagated unchanged from construction or grant
    """
    service = get_registration_service(settings)

    user = service.create_user(
        email=args.email,
        age=args.age,
        name=args.name,
        surname=args.surname,
        middle_name=args.middle_name,
    )
    print(f"Welcome {get_fullname(user)} of {user.age} years old")

    service.grant_user(user)
    if user.is_verified:
        print(f"User email {user.verified_email} is verified!")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except PydanticValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    configure_logging(settings)

    try:
        run(args, settings)
    except UserError as exc:
        kind = exc.kind.value if exc.kind else type(exc).__name__
        logger.debug("Registration failed: %s (%s)", exc.message, kind)
        print(f"Error: {exc.message}", file=sys.stderr)
        return EXIT_USER_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
