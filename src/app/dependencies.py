"""
Dependency factories - Wiring between domain and adapters.

This module builds the verification adapter and the domain service from
application settings, in one place, so the entry point and tests share
the same composition.
"""

from src.adapters.verification import SubstringEmailVerifier
from src.config.settings import Settings, get_settings
from src.domain.registration import RegistrationService


def get_email_verifier(settings: Settings | None = None) -> SubstringEmailVerifier:
    """Create the placeholder verifier using the configured marker."""
    settings = settings or get_settings()
    return SubstringEmailVerifier(marker=settings.verification_marker)


def get_registration_service(settings: Settings | None = None) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires the verification adapter into the domain service.
    """
    return RegistrationService(verifier=get_email_verifier(settings))
