"""Gauss-Jordan elimination on dense augmented matrices.

The routines below work in place on a 2D NumPy array holding a square
coefficient block followed by one or more right-hand-side columns. After
:func:`gauss_jordan_echelonize` the leading block is the identity (for a
non-singular system) and the trailing columns hold the solutions.

Pivoting picks the first non-zero entry in a column, not the largest one.
This is adequate for the small normal-equation systems of low-degree fits
but loses precision for high degrees or badly scaled samples.

Row operations are vectorized across columns only, so each matrix entry
sees exactly the same sequence of floating-point operations as the scalar
algorithm and results are reproducible bit for bit. Arithmetic is done in
``float64`` and rounded once when stored, so a ``float32`` matrix rounds
every updated entry a single time.
"""

from __future__ import annotations

import warnings

import numpy as np

from polyfitkit.utils.types import AugmentedMatrix

__all__ = [
    "gauss_jordan_divide",
    "gauss_jordan_eliminate",
    "gauss_jordan_echelonize",
]


def gauss_jordan_divide(
    matrix: AugmentedMatrix,
    row: int,
    col: int,
    num_cols: int,
) -> None:
    """Scales ``row`` so that its entry in ``col`` becomes one.

    Entries ``col + 1 .. num_cols - 1`` are divided by ``matrix[row, col]``
    and the pivot itself is set to exactly ``1``.

    Args:
        matrix: Matrix to modify in place.
        row: Pivot row.
        col: Pivot column.
        num_cols: Number of columns to process.
    """
    pivot = np.float64(matrix[row, col])
    matrix[row, col + 1:num_cols] = matrix[row, col + 1:num_cols].astype(np.float64) / pivot
    matrix[row, col] = 1


def gauss_jordan_eliminate(
    matrix: AugmentedMatrix,
    row: int,
    col: int,
    num_rows: int,
    num_cols: int,
) -> None:
    """Clears column ``col`` in every row except the pivot row.

    Each other row with a non-zero entry in ``col`` has ``matrix[i, col]``
    times the pivot row subtracted from it (columns ``col + 1`` onward),
    after which its entry in ``col`` is set to exactly ``0``. Rows above the
    pivot are reduced as well as rows below it.

    Args:
        matrix: Matrix to modify in place. The pivot entry is expected to be 1.
        row: Pivot row.
        col: Pivot column.
        num_rows: Number of rows to process.
        num_cols: Number of columns to process.
    """
    pivot_tail = matrix[row, col + 1:num_cols].astype(np.float64)
    for i in range(num_rows):
        if i != row and matrix[i, col] != 0:
            factor = np.float64(matrix[i, col])
            tail = matrix[i, col + 1:num_cols].astype(np.float64)
            matrix[i, col + 1:num_cols] = tail - factor * pivot_tail
            matrix[i, col] = 0


def gauss_jordan_echelonize(matrix: AugmentedMatrix) -> AugmentedMatrix:
    """Reduces ``matrix`` in place to reduced row-echelon form.

    Columns are processed left to right. For each column the first row at or
    below the current pivot row with a non-zero entry becomes the pivot; it is
    swapped into place, scaled to one and eliminated from all other rows.

    A column without any non-zero candidate is skipped without advancing the
    pivot row, and a ``RuntimeWarning`` is emitted. No error is raised for
    singular systems: the affected entries of the solution column keep
    whatever value they hold.

    Args:
        matrix: 2D array of shape ``(rows, cols)``; modified in place.

    Returns:
        The same ``matrix`` object, for convenience.
    """
    rows, cols = matrix.shape
    i = 0
    j = 0

    while i < rows and j < cols:
        k = i
        while k < rows and matrix[k, j] == 0:
            k += 1

        if k < rows:
            if k != i:
                matrix[[i, k]] = matrix[[k, i]]
            if matrix[i, j] != 1:
                gauss_jordan_divide(matrix, i, j, cols)
            gauss_jordan_eliminate(matrix, i, j, rows, cols)
            i += 1
        else:
            warnings.warn(
                f"gauss_jordan_echelonize: column {j} has no pivot at or below row {i}; "
                "the system is singular and the column is left unsolved.",
                RuntimeWarning,
            )
        j += 1

    return matrix
