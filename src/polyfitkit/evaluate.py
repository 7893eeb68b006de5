"""Evaluation of power-basis polynomials.

:func:`regress` is the scalar kernel used by the fit statistics;
:func:`evaluate` adds support for arrays of query points, and
:class:`Polynomial` binds a coefficient vector into a callable model.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from polyfitkit.exceptions import ShapeError
from polyfitkit.expression import format_expression
from polyfitkit.utils.types import Coefficients, CoefficientsLike

__all__ = ["regress", "evaluate", "Polynomial"]


def regress(x: float, terms: CoefficientsLike) -> float:
    """Evaluates ``sum(terms[i] * x**i)`` at a single point.

    Terms are accumulated in increasing order of the exponent.

    Args:
        x: Query point.
        terms: Power-basis coefficients.

    Returns:
        The polynomial value as a Python float. NaN inputs propagate and
        overflow yields ``inf`` rather than an exception.
    """
    x = np.float64(x)
    a = np.float64(0.0)
    for exp, term in enumerate(terms):
        a += np.float64(term) * x**exp
    return float(a)


def evaluate(terms: CoefficientsLike, x: ArrayLike) -> float | NDArray[np.float64]:
    """Evaluates a power-basis polynomial at one or more points.

    Args:
        terms: Power-basis coefficients, ``terms[i]`` multiplies ``x**i``.
        x: Scalar query point or array-like of query points.

    Returns:
        A float for scalar ``x``; otherwise a ``float64`` array with the
        shape of ``x`` whose entries match :func:`regress` point by point.
    """
    xs = np.asarray(x, dtype=np.float64)
    if xs.ndim == 0:
        return regress(float(xs), terms)

    out = np.zeros_like(xs)
    for exp, term in enumerate(np.asarray(terms, dtype=np.float64)):
        out += term * np.power(xs, exp)
    return out


class Polynomial:
    """Callable polynomial model bound to a fixed coefficient vector.

    The coefficients are copied and made read-only on construction, so a
    ``Polynomial`` is unaffected by later changes to the array it was built
    from.

    Example:
        >>> from polyfitkit.evaluate import Polynomial
        >>> poly = Polynomial([1.0, 0.0, 2.0])  # 1 + 2 x^2
        >>> poly(3.0)
        19.0
        >>> poly.degree
        2
    """

    def __init__(self, terms: CoefficientsLike) -> None:
        """Initializes the polynomial.

        Args:
            terms: Non-empty 1D power-basis coefficients.

        Raises:
            ShapeError: If ``terms`` is empty, complex, or not 1D numeric.
        """
        try:
            arr = np.asarray(terms)
            if arr.dtype.kind == "c":
                raise ShapeError(f"terms must be real; got dtype {arr.dtype}.")
            dtype = arr.dtype if arr.dtype.kind == "f" else np.float64
            coefficients = np.array(arr, dtype=dtype)
        except ShapeError:
            raise
        except (TypeError, ValueError, OverflowError) as exc:
            raise ShapeError("terms could not be converted to a numeric array.") from exc
        if coefficients.ndim != 1 or coefficients.size == 0:
            raise ShapeError(
                f"terms must be a non-empty 1D sequence; got shape {coefficients.shape}."
            )
        coefficients.setflags(write=False)
        self._coefficients: Coefficients = coefficients

    @property
    def coefficients(self) -> Coefficients:
        """Returns a writable copy of the coefficient vector."""
        return self._coefficients.copy()

    @property
    def degree(self) -> int:
        return int(self._coefficients.size - 1)

    def __call__(self, x: ArrayLike) -> float | NDArray[np.float64]:
        return evaluate(self._coefficients, x)

    def __eq__(self, other: Any) -> object:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return np.array_equal(self._coefficients, other._coefficients)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients.tolist()!r})"

    def __str__(self) -> str:
        return format_expression(self._coefficients)
