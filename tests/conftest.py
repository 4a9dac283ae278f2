"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings cache isolation between tests
- Verifier doubles for the EmailVerifier port
- A registration service wired with the placeholder verifier
"""

from collections.abc import Generator
from unittest.mock import Mock

import pytest

from src.adapters.verification import SubstringEmailVerifier
from src.config.settings import get_settings
from src.domain.registration import RegistrationService


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from cached settings and from the caller's environment."""
    for var in ("TYPESTATE_LOG_LEVEL", "TYPESTATE_LOG_FORMAT", "TYPESTATE_VERIFICATION_MARKER"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def verifier() -> SubstringEmailVerifier:
    """Placeholder verifier with the default marker."""
    return SubstringEmailVerifier()


@pytest.fixture
def accepting_verifier() -> Mock:
    """Verifier double that confirms every address."""
    mock = Mock()
    mock.is_verified.return_value = True
    return mock


@pytest.fixture
def rejecting_verifier() -> Mock:
    """Verifier double that confirms nothing."""
    mock = Mock()
    mock.is_verified.return_value = False
    return mock


@pytest.fixture
def service(verifier: SubstringEmailVerifier) -> RegistrationService:
    """Registration service wired with the placeholder verifier."""
    return RegistrationService(verifier=verifier)
