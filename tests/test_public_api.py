"""Unit tests for public API."""

from __future__ import annotations

import polyfitkit
from polyfitkit import PolyfitKit, Polynomial, evaluate


def test_kit_importable_from_top_level():
    """Test that the public kit and evaluator can be imported from top level."""
    assert PolyfitKit is not None
    assert Polynomial is not None
    assert evaluate is polyfitkit.evaluate


def test_public_all_contains_expected_names():
    """Test that __all__ contains the expected public names."""
    expected = {
        "PolyfitKit",
        "Polynomial",
        "SampleStore",
        "evaluate",
        "regress",
        "ShapeError",
        "LengthMismatchError",
        "InvalidDegreeError",
    }
    assert expected.issubset(set(polyfitkit.__all__))
