"""Provides the PolyfitKit class.

A light wrapper around the sample store, the normal-equation solver and the
fit statistics that exposes a simple API for least-squares polynomial fits.

Typical usage examples:

>>> from polyfitkit import PolyfitKit
>>>
>>> kit = PolyfitKit([0, 1, 2, 3], [1.0, 3.0, 5.0, 7.0])
>>> terms = kit.compute_coefficients(1)
>>> poly = kit.get_polynomial(1)
>>> poly(4.0)  # doctest: +SKIP
9.0
>>> kit.correlation_coefficient(terms)  # doctest: +SKIP
1.0
"""

from __future__ import annotations

from typing import Any, Iterable

from polyfitkit.evaluate import Polynomial, evaluate, regress
from polyfitkit.expression import format_expression
from polyfitkit.gauss_jordan import (
    gauss_jordan_divide,
    gauss_jordan_echelonize,
    gauss_jordan_eliminate,
)
from polyfitkit.normal_equations import solve_coefficients
from polyfitkit.samples import SampleStore
from polyfitkit.statistics import correlation_coefficient, standard_error
from polyfitkit.utils.concurrency import parallel_execute, resolve_workers
from polyfitkit.utils.types import Coefficients, CoefficientsLike, SampleArray
from polyfitkit.utils.validate import validate_degree

__all__ = ["PolyfitKit"]


class PolyfitKit:
    """Least-squares polynomial fits of a fixed set of samples."""

    gauss_jordan_divide = staticmethod(gauss_jordan_divide)
    gauss_jordan_eliminate = staticmethod(gauss_jordan_eliminate)
    gauss_jordan_echelonize = staticmethod(gauss_jordan_echelonize)
    regress = staticmethod(regress)
    evaluate = staticmethod(evaluate)

    def __init__(self, x: Any = None, y: Any = None):
        """Initialise with paired samples.

        Args:
            x: Sample x values, a list/tuple of numbers or a 1D NumPy array.
            y: Sample y values with the same container kind and length as ``x``.
               Two ``float32`` arrays keep single precision throughout the fit.

        Raises:
            ShapeError: If ``x`` or ``y`` is missing or not a numeric container.
            LengthMismatchError: If ``x`` and ``y`` differ in length.
        """
        self.samples = SampleStore(x, y)

    @property
    def x(self) -> SampleArray:
        return self.samples.x

    @property
    def y(self) -> SampleArray:
        return self.samples.y

    def compute_coefficients(self, degree: int) -> Coefficients:
        """Returns the ``degree + 1`` least-squares coefficients, lowest power first."""
        return solve_coefficients(self.samples, degree)

    def get_polynomial(self, degree: int) -> Polynomial:
        """Returns a callable model ``f(x)`` for the fit of the given degree."""
        return Polynomial(self.compute_coefficients(degree))

    get_evaluator = get_polynomial

    def to_expression(self, degree: int) -> str:
        """Returns the fitted polynomial as ``"c0 + c1x^1 + c2x^2 + ..."``."""
        return format_expression(self.compute_coefficients(degree))

    def correlation_coefficient(self, terms: CoefficientsLike) -> float:
        """Returns the squared correlation between ``terms`` predictions and ``y``."""
        return correlation_coefficient(self.samples, terms)

    def standard_error(self, terms: CoefficientsLike) -> float:
        """Returns the standard error of ``terms`` predictions against ``y``."""
        return standard_error(self.samples, terms)

    def fit_degrees(
        self,
        degrees: Iterable[int],
        *,
        n_workers: int | None = None,
    ) -> dict[int, Coefficients]:
        """Fits several degrees of the same samples.

        Each degree is solved with its own normal-equations matrix, so the
        fits may run concurrently.

        Args:
            degrees: Degrees to fit. Duplicates are fitted once.
            n_workers: Number of threads. ``None`` uses the
                ``POLYFITKIT_WORKERS`` environment variable or the module
                default.

        Returns:
            Mapping from degree to its coefficient vector, in the order the
            degrees were first given.

        Raises:
            InvalidDegreeError: If any degree is negative or not an integer.
                All degrees are validated before any fit starts.
        """
        unique = list(dict.fromkeys(validate_degree(d) for d in degrees))
        workers = resolve_workers(n_workers, len(unique))
        results = parallel_execute(
            solve_coefficients,
            [(self.samples, d) for d in unique],
            n_workers=workers,
        )
        return dict(zip(unique, results))
