"""Public exceptions namespace."""

from .foundation.exceptions import ConfigurationError, DimensionMismatchError, PSOKitError

__all__ = ["PSOKitError", "ConfigurationError", "DimensionMismatchError"]
