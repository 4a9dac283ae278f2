"""Verification adapters - EmailVerifier implementations."""

from .substring import SubstringEmailVerifier

__all__ = ["SubstringEmailVerifier"]
