"""Exception types raised by PolyfitKit.

All errors are raised at the boundary of the public API, before any numeric
work starts. Numeric degeneracies (singular normal equations, constant
predictions, too few samples for a standard error) are never raised; they
produce defined fallback values instead.
"""

from __future__ import annotations

__all__ = [
    "PolyfitError",
    "ShapeError",
    "LengthMismatchError",
    "InvalidDegreeError",
]


class PolyfitError(Exception):
    """Base class for all PolyfitKit errors."""


class ShapeError(PolyfitError, TypeError):
    """Sample inputs are not recognized 1D numeric containers.

    Raised when ``x`` or ``y`` is missing, is not a list, tuple or 1D NumPy
    array of real numbers, or when ``x`` and ``y`` are of different
    container kinds or precisions.
    """


class LengthMismatchError(PolyfitError, ValueError):
    """The ``x`` and ``y`` samples have different lengths."""


class InvalidDegreeError(PolyfitError, ValueError):
    """The polynomial degree is negative or not an integer."""
