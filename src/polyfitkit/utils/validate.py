"""Validation utilities for PolyfitKit."""

from __future__ import annotations

from numbers import Integral, Real
from typing import Any

import numpy as np

from polyfitkit.exceptions import InvalidDegreeError, LengthMismatchError, ShapeError
from polyfitkit.utils.types import SampleArray

__all__ = [
    "validate_samples",
    "validate_degree",
    "resolve_precision",
]


def resolve_precision(x: Any, y: Any) -> np.dtype:
    """Returns the floating dtype a pair of sample containers is stored in.

    Lists and tuples are stored in ``float64``. NumPy arrays keep ``float32``
    when both are ``float32``; any other real dtype (integers, ``float64``)
    is stored in ``float64``.

    Args:
        x: Sample x values.
        y: Sample y values.

    Returns:
        Either ``np.dtype(np.float32)`` or ``np.dtype(np.float64)``.

    Raises:
        ShapeError: If the containers are not both sequences or both arrays,
            if an array dtype is not real numeric, or if exactly one of the
            arrays is ``float32``.
    """
    if isinstance(x, np.ndarray) and isinstance(y, np.ndarray):
        for name, arr in (("x", x), ("y", y)):
            if arr.dtype.kind not in "iuf":
                raise ShapeError(f"{name} must have a real numeric dtype; got {arr.dtype}.")
        is_single = (x.dtype == np.float32, y.dtype == np.float32)
        if all(is_single):
            return np.dtype(np.float32)
        if any(is_single):
            raise ShapeError(
                f"x and y must share the same precision; got {x.dtype} and {y.dtype}."
            )
        return np.dtype(np.float64)

    if isinstance(x, (list, tuple)) and isinstance(y, (list, tuple)):
        return np.dtype(np.float64)

    raise ShapeError(
        "x and y must both be lists/tuples or both be 1D NumPy arrays; "
        f"got {type(x).__name__} and {type(y).__name__}."
    )


def _as_sample_array(values: Any, dtype: np.dtype, name: str) -> SampleArray:
    """Copies ``values`` into a read-only 1D array of ``dtype``."""
    if not isinstance(values, np.ndarray):
        bad = [v for v in values if isinstance(v, bool) or not isinstance(v, Real)]
        if bad:
            raise ShapeError(f"{name} must contain only real numbers; got {bad[0]!r}.")
    try:
        arr = np.array(values, dtype=dtype)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ShapeError(f"{name} could not be converted to a numeric array.") from exc

    if arr.ndim != 1:
        raise ShapeError(f"{name} must be 1D; got ndim={arr.ndim}.")
    arr.setflags(write=False)
    return arr


def validate_samples(x: Any, y: Any) -> tuple[SampleArray, SampleArray]:
    """Validates paired samples and converts them into read-only NumPy arrays.

    Requirements:
      - ``x`` and ``y`` are both lists/tuples of real numbers or both 1D
        NumPy arrays with a real numeric dtype.
      - ``len(x) == len(y)``.

    NaN and infinite values are accepted as-is.

    Args:
        x: Sample x values.
        y: Sample y values.

    Returns:
        Tuple of ``(x_array, y_array)`` sharing one floating dtype.

    Raises:
        ShapeError: If the inputs are not recognized numeric containers.
        LengthMismatchError: If ``x`` and ``y`` differ in length.
    """
    dtype = resolve_precision(x, y)
    x_arr = _as_sample_array(x, dtype, "x")
    y_arr = _as_sample_array(y, dtype, "y")

    if x_arr.shape[0] != y_arr.shape[0]:
        raise LengthMismatchError(
            f"x and y must have the same length; got {x_arr.shape[0]} and {y_arr.shape[0]}."
        )
    return x_arr, y_arr


def validate_degree(degree: Any) -> int:
    """Checks that ``degree`` is a non-negative integer.

    Python and NumPy integers are accepted; ``bool`` and floats (even
    integral ones such as ``2.0``) are rejected.

    Args:
        degree: Requested polynomial degree.

    Returns:
        The degree as a Python ``int``.

    Raises:
        InvalidDegreeError: If ``degree`` is not an integer or is negative.
    """
    if isinstance(degree, bool) or not isinstance(degree, Integral):
        raise InvalidDegreeError(
            f"degree must be a non-negative integer; got {degree!r} of type {type(degree).__name__}."
        )
    if degree < 0:
        raise InvalidDegreeError(f"degree must be a non-negative integer; got {degree}.")
    return int(degree)
