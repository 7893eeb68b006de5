"""Utility functions for PolyfitKit package."""

from .validate import (
    validate_degree,
    validate_samples,
)

__all__ = [
    "validate_degree",
    "validate_samples",
]
