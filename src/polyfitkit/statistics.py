"""Goodness-of-fit statistics for a fitted coefficient vector.

Both statistics compare the model prediction ``regress(x_i, terms)`` with the
observed ``y_i`` over all samples in a :class:`~polyfitkit.samples.SampleStore`.
Degenerate inputs produce ``0.0`` instead of an error.
"""

from __future__ import annotations

import math

from polyfitkit.evaluate import regress
from polyfitkit.samples import SampleStore
from polyfitkit.utils.types import CoefficientsLike

__all__ = ["correlation_coefficient", "standard_error"]


def correlation_coefficient(store: SampleStore, terms: CoefficientsLike) -> float:
    """Returns the squared Pearson correlation between predictions and observations.

    The sums are accumulated sample by sample, with the prediction on the
    "x" side and the observation on the "y" side::

        r = ((sxy - sx*sy/n) / sqrt((sx2 - sx*sx/n) * (sy2 - sy*sy/n))) ** 2

    Args:
        store: Observed samples.
        terms: Power-basis coefficients of the fit.

    Returns:
        The squared correlation coefficient. If the denominator is exactly
        zero (constant predictions or constant observations) the result is
        ``0.0``. An empty store gives NaN.
    """
    n = len(store)
    sx = 0.0
    sy = 0.0
    sxy = 0.0
    sx2 = 0.0
    sy2 = 0.0

    for xi, yi in store:
        predicted = regress(xi, terms)
        sx += predicted
        sy += yi
        sxy += predicted * yi
        sx2 += predicted * predicted
        sy2 += yi * yi

    if n == 0:
        return math.nan

    variance_product = (sx2 - (sx * sx) / n) * (sy2 - (sy * sy) / n)
    # Cancellation can leave the product slightly negative; that is NaN, not an error.
    div = math.sqrt(variance_product) if variance_product >= 0 else math.nan
    if div == 0:
        return 0.0
    return ((sxy - (sx * sy) / n) / div) ** 2


def standard_error(store: SampleStore, terms: CoefficientsLike) -> float:
    """Returns the standard error of the fit.

    Computed as ``sqrt(sum((regress(x_i) - y_i) ** 2) / (n - 2))``.

    Args:
        store: Observed samples.
        terms: Power-basis coefficients of the fit.

    Returns:
        The standard error, or ``0.0`` when there are two samples or fewer.
    """
    n = len(store)
    if n <= 2:
        return 0.0

    total = 0.0
    for xi, yi in store:
        residual = regress(xi, terms) - yi
        total += residual * residual
    return math.sqrt(total / (n - 2))
