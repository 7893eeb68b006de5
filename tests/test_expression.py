"""Tests for polyfitkit.expression."""

from polyfitkit.expression import format_coefficient, format_expression


def test_format_coefficient_uses_shortest_round_trip():
    """Tests that coefficients are printed at full precision."""
    assert format_coefficient(0.1) == "0.1"
    assert format_coefficient(-0.002598631007421001) == "-0.002598631007421001"


def test_format_expression_joins_terms_with_powers():
    """Tests the term layout, including negative coefficients."""
    assert format_expression([1.5, -2.0, 0.25]) == "1.5 + -2.0x^1 + 0.25x^2"


def test_format_expression_constant_and_empty():
    """Tests degree-0 and empty coefficient vectors."""
    assert format_expression([3.25]) == "3.25"
    assert format_expression([]) == ""
