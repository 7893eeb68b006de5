"""Human-readable rendering of power-basis polynomials."""

from __future__ import annotations

from polyfitkit.utils.types import CoefficientsLike

__all__ = ["format_coefficient", "format_expression"]


def format_coefficient(value: float) -> str:
    """Returns the shortest string that round-trips ``value`` as a float."""
    return repr(float(value))


def format_expression(terms: CoefficientsLike) -> str:
    """Renders coefficients as ``"c0 + c1x^1 + c2x^2 + ..."``.

    Coefficients are printed at full precision and negative coefficients keep
    their sign inside the term, e.g. ``"1.0 + -2.5x^1"``.

    Args:
        terms: Power-basis coefficients, ``terms[i]`` multiplies ``x**i``.

    Returns:
        The expression string, or ``""`` for an empty coefficient vector.
    """
    parts = []
    for exp, term in enumerate(terms):
        if exp == 0:
            parts.append(format_coefficient(term))
        else:
            parts.append(f"{format_coefficient(term)}x^{exp}")
    return " + ".join(parts)
