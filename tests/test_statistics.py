"""Tests for polyfitkit.statistics."""

from __future__ import annotations

import math

import numpy as np
import pytest

from polyfitkit.samples import SampleStore
from polyfitkit.statistics import correlation_coefficient, standard_error


def test_correlation_is_one_for_exact_fit():
    """Tests that predictions equal to observations correlate perfectly."""
    store = SampleStore([0, 1, 2, 3], [1.0, 3.0, 5.0, 7.0])
    assert correlation_coefficient(store, [1.0, 2.0]) == pytest.approx(1.0, rel=1e-12)


def test_correlation_is_squared_so_anticorrelation_is_positive():
    """Tests that a perfectly anti-correlated model still gives one."""
    store = SampleStore([0, 1, 2, 3], [1.0, 3.0, 5.0, 7.0])
    assert correlation_coefficient(store, [0.0, -1.0]) == pytest.approx(1.0, rel=1e-12)


def test_correlation_zero_for_constant_predictions():
    """Tests the zero-denominator guard when the model is constant."""
    store = SampleStore([0, 1, 2, 3], [1.0, 3.0, 2.0, 7.0])
    assert correlation_coefficient(store, [5.0]) == 0.0


def test_correlation_zero_for_constant_observations():
    """Tests the zero-denominator guard when all y are equal."""
    store = SampleStore([0, 1, 2, 3], [3.0, 3.0, 3.0, 3.0])
    assert correlation_coefficient(store, [1.0, 1.0]) == 0.0


def test_correlation_matches_numpy_corrcoef():
    """Tests agreement with the squared Pearson coefficient from NumPy."""
    rng = np.random.default_rng(11)
    x = np.linspace(-1.0, 2.0, 30)
    y = 0.5 - x + 0.3 * x**2 + rng.normal(0, 0.1, size=x.size)
    terms = [0.4, -0.9, 0.35]
    predicted = terms[0] + terms[1] * x + terms[2] * x**2

    expected = np.corrcoef(predicted, y)[0, 1] ** 2
    assert correlation_coefficient(SampleStore(x, y), terms) == pytest.approx(expected, rel=1e-10)


def test_correlation_empty_store_is_nan():
    """Tests that no samples give NaN rather than an error."""
    assert math.isnan(correlation_coefficient(SampleStore([], []), [1.0]))


@pytest.mark.parametrize("n", [0, 1, 2])
def test_standard_error_zero_for_two_or_fewer_samples(n):
    """Tests that too few degrees of freedom give exactly zero."""
    store = SampleStore(list(range(n)), [float(v) * 10 for v in range(n)])
    assert standard_error(store, [1.0]) == 0.0


def test_standard_error_known_residuals():
    """Tests sqrt(sum(residual**2) / (n - 2)) on hand-picked residuals."""
    store = SampleStore([0, 1, 2, 3], [1.0, -1.0, 1.0, -1.0])
    # residuals are all +-1 against the zero polynomial: sqrt(4 / 2)
    assert standard_error(store, [0.0]) == math.sqrt(2.0)


def test_standard_error_zero_for_exact_fit():
    """Tests that an exact model has no error."""
    store = SampleStore([0, 1, 2, 3, 4], [1.0, 3.0, 5.0, 7.0, 9.0])
    assert standard_error(store, [1.0, 2.0]) == 0.0
