"""Shared typing aliases for PolyfitKit."""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

SampleArray: TypeAlias = NDArray[np.floating]
Coefficients: TypeAlias = NDArray[np.floating]
AugmentedMatrix: TypeAlias = NDArray[np.floating]
FloatArray: TypeAlias = NDArray[np.float64]

SampleLike: TypeAlias = Sequence[float] | NDArray[np.number]
CoefficientsLike: TypeAlias = Sequence[float] | NDArray[np.floating]
