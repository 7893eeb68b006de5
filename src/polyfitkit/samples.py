"""Read-only storage of paired ``(x, y)`` observations."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from polyfitkit.utils.types import SampleLike
from polyfitkit.utils.validate import validate_samples

__all__ = ["SampleStore"]


class SampleStore:
    """Paired samples used by every fit.

    The store keeps two equal-length, non-writeable 1D arrays. Lists and
    tuples are stored in ``float64``; a pair of ``float32`` arrays keeps
    single precision, which then carries through the normal equations and
    the coefficient vector.

    Attributes:
        x: Sample x values.
        y: Sample y values.
        dtype: Floating dtype shared by ``x`` and ``y``.

    Example:
        >>> from polyfitkit.samples import SampleStore
        >>> store = SampleStore([0, 1, 2], [1.0, 3.0, 5.0])
        >>> len(store)
        3
        >>> store[1]
        (1.0, 3.0)
    """

    def __init__(self, x: SampleLike, y: SampleLike) -> None:
        """Initializes the store.

        Args:
            x: Sample x values, a list/tuple of numbers or a 1D NumPy array.
            y: Sample y values, same container kind and length as ``x``.

        Raises:
            ShapeError: If ``x`` or ``y`` is not a recognized numeric container.
            LengthMismatchError: If ``x`` and ``y`` differ in length.
        """
        self.x, self.y = validate_samples(x, y)
        self.dtype = self.x.dtype

    def __len__(self) -> int:
        return int(self.x.shape[0])

    def __getitem__(self, index: int) -> tuple[float, float]:
        return float(self.x[index]), float(self.y[index])

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for xi, yi in zip(self.x, self.y):
            yield float(xi), float(yi)

    def __repr__(self) -> str:
        return f"SampleStore(n={len(self)}, dtype={np.dtype(self.dtype).name})"
