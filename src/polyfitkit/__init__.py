"""Provides all polyfitkit methods."""

from importlib.metadata import PackageNotFoundError, version

from polyfitkit.evaluate import Polynomial, evaluate, regress
from polyfitkit.exceptions import (
    InvalidDegreeError,
    LengthMismatchError,
    PolyfitError,
    ShapeError,
)
from polyfitkit.polyfit_kit import PolyfitKit
from polyfitkit.samples import SampleStore

try:
    __version__ = version("polyfitkit")
except PackageNotFoundError:
    pass

__all__ = [
    "PolyfitKit",
    "Polynomial",
    "SampleStore",
    "evaluate",
    "regress",
    "PolyfitError",
    "ShapeError",
    "LengthMismatchError",
    "InvalidDegreeError",
]
