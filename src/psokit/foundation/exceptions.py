"""
psokit exception hierarchy.

All psokit-specific exceptions inherit from PSOKitError so callers can catch
them in one place. Errors carry a human-readable message, an optional
suggestion and an optional context label naming where they were raised.

Example:
    try:
        handler = SwarmHandler(...)
    except PSOKitError as e:
        print(f"Swarm construction failed: {e}")
        print(f"Raised in: {e.context}")
"""

from __future__ import annotations

from typing import Any


class PSOKitError(Exception):
    """
    Base exception for all psokit errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
        context: Optional label of the operation that raised the error
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
        context: str | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with context and suggestion."""
        msg = self.message
        if self.context:
            msg = f"[{self.context}] {msg}"
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(PSOKitError):
    """Raised when swarm configuration is invalid or inconsistent."""

    pass


class DimensionMismatchError(ConfigurationError):
    """Raised when the velocity field does not cover the declared dimension."""

    def __init__(self, expected: int, actual: int, context: str | None = None) -> None:
        message = f"Velocity field of length {actual} does not match dimension {expected}."
        suggestion = "Provide one (lower, upper) velocity pair per dimension"
        super().__init__(
            message,
            suggestion,
            {"dimension": expected, "velocity_field": actual},
            context=context,
        )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "PSOKitError",
    "ConfigurationError",
    "DimensionMismatchError",
]
