"""Normal equations for least-squares polynomial fits.

For a fit of degree ``d`` with ``p = d + 1`` coefficients, the normal
equations form a ``p x p`` Hankel matrix of power sums augmented by one
right-hand-side column::

    m[r, c] = sum_i x_i ** (r + c)     for c < p
    m[r, p] = sum_i x_i ** r * y_i

Since ``m[r, c]`` depends only on ``r + c``, the ``2p - 1`` distinct power
sums are accumulated once and scattered into the matrix.
"""

from __future__ import annotations

import warnings

import numpy as np

from polyfitkit.gauss_jordan import gauss_jordan_echelonize
from polyfitkit.logger import polyfitkit_logger
from polyfitkit.samples import SampleStore
from polyfitkit.utils.types import AugmentedMatrix, Coefficients, FloatArray, SampleArray
from polyfitkit.utils.validate import validate_degree

__all__ = [
    "power_sums",
    "build_normal_equations",
    "solve_coefficients",
]


def power_sums(store: SampleStore, degree: int) -> tuple[FloatArray, SampleArray]:
    """Accumulates the power sums needed for the normal equations.

    Samples are visited once, in order. For every sample all required powers
    are formed together and added to the running sums, so each sum is
    accumulated sequentially over the samples.

    The power sums are kept in ``float64``. The right-hand side is kept in the
    store's dtype: every addition is carried out in ``float64`` and rounded
    back on store, so ``float32`` samples round after each sample.

    Args:
        store: Samples to fit.
        degree: Polynomial degree (``>= 0``).

    Returns:
        A tuple ``(mpc, rhs)`` where ``mpc[k]`` is ``sum x**k`` for
        ``k = 0 .. 2 * degree`` (``float64``, ``mpc[0]`` is the sample count)
        and ``rhs[r]`` is ``sum x**r * y`` for ``r = 0 .. degree`` (store dtype).
    """
    p = degree + 1
    mpc = np.zeros(2 * p - 1, dtype=np.float64)
    rhs = np.zeros(p, dtype=store.dtype)
    contribution = np.empty(p, dtype=np.float64)
    mpc[0] = len(store)

    exponents = np.arange(1, 2 * p - 1)
    for xi, yi in store:
        powers = np.power(xi, exponents, dtype=np.float64)
        mpc[1:] += powers
        contribution[0] = yi
        contribution[1:] = powers[:p - 1] * yi
        rhs[:] = rhs.astype(np.float64) + contribution

    return mpc, rhs


def build_normal_equations(store: SampleStore, degree: int) -> AugmentedMatrix:
    """Builds the augmented normal-equations matrix for a polynomial fit.

    Args:
        store: Samples to fit.
        degree: Polynomial degree (``>= 0``).

    Returns:
        A freshly allocated array of shape ``(degree + 1, degree + 2)`` in the
        store's dtype. For ``degree = 0`` this is ``[[n, sum(y)]]``.
    """
    p = degree + 1
    mpc, rhs = power_sums(store, degree)

    matrix = np.empty((p, p + 1), dtype=store.dtype)
    hankel_index = np.add.outer(np.arange(p), np.arange(p))
    matrix[:, :p] = mpc[hankel_index]
    matrix[:, p] = rhs
    return matrix


def solve_coefficients(store: SampleStore, degree: int) -> Coefficients:
    """Computes least-squares polynomial coefficients for ``store``.

    The normal equations are built in a new matrix, reduced with
    Gauss-Jordan elimination, and the solution is read from the last
    column. Degrees that leave the system underdetermined
    (``degree >= len(store)``) are solved anyway; a ``RuntimeWarning`` is emitted and
    unsolved coefficients keep the values left in the matrix.

    Args:
        store: Samples to fit.
        degree: Polynomial degree.

    Returns:
        Array of ``degree + 1`` coefficients in the store's dtype, where
        element ``i`` multiplies ``x**i``.

    Raises:
        InvalidDegreeError: If ``degree`` is negative or not an integer.
    """
    degree = validate_degree(degree)
    n = len(store)
    if degree >= n:
        warnings.warn(
            f"solve_coefficients: degree {degree} needs at least {degree + 1} samples; "
            f"got {n}. The fit is underdetermined.",
            RuntimeWarning,
        )

    matrix = build_normal_equations(store, degree)
    polyfitkit_logger.debug(
        "solve_coefficients: reducing %dx%d normal equations for degree %d.",
        matrix.shape[0],
        matrix.shape[1],
        degree,
    )
    gauss_jordan_echelonize(matrix)
    return matrix[:, degree + 1].copy()
