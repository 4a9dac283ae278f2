"""
Substring email verifier adapter - Implements EmailVerifier protocol.

This module provides a placeholder implementation of the domain's
verification port: an address counts as confirmed when it contains a
marker substring. It stands in for a real channel (confirmation link or
code) and can be replaced without changing the domain state machine.
"""

import logging

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "ok"


class SubstringEmailVerifier:
    """
    Implements EmailVerifier protocol via a substring check.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Deterministic and side-effect free apart from debug logging.
    """

    def __init__(self, marker: str = DEFAULT_MARKER) -> None:
        if not marker:
            raise ValueError("Verification marker must not be empty")
        self.marker = marker

    def is_verified(self, address: str) -> bool:
        """
        Check the address for the marker substring.

        Args:
            address: Syntactically valid email address

        Returns:
            True if the marker occurs anywhere in the address
        """
        confirmed = self.marker in address
        logger.debug("[VERIFICATION] Email: %s Confirmed: %s", address, confirmed)
        return confirmed
