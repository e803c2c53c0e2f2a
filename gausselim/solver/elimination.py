# gausselim/solver/elimination.py
"""
Forward elimination without pivoting.

Reduces (A, b) in place to upper-triangular form. Columns are processed
left to right; a zero pivot aborts with EliminationFailure. Rows are never
swapped.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from gausselim.linalg.arrays import check_system
from gausselim.linalg.slices import tail, scale_and_add
from gausselim.solver.errors import EliminationFailure

__all__ = ["eliminate", "is_zero_pivot"]


def is_zero_pivot(value: float, pivot_tol: float = 0.0) -> bool:
    """Exact ``value == 0`` unless a positive ``pivot_tol`` is given."""
    if pivot_tol > 0.0:
        return abs(value) <= pivot_tol
    return value == 0.0


def eliminate(
    A: np.ndarray,
    b: np.ndarray,
    *,
    pivot_tol: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Classical Gaussian elimination, in place.

    Parameters
    ----------
    A : np.ndarray, shape (n, n), floating dtype
        Overwritten with its upper-triangular factor.
    b : np.ndarray, shape (n,), floating dtype
        Overwritten with the matching transformed right-hand side.
    pivot_tol : float
        0.0 (default) keeps the exact-zero pivot test.

    Returns
    -------
    (A, b) : the same arrays, for chaining into back substitution.

    Raises
    ------
    EliminationFailure
        If ``A[j, j]`` is zero at step ``j``.
    """
    n = check_system(A, b, writable=True)

    # columns 0 .. n-2; everything below the diagonal becomes zero
    for j in range(n - 1):
        pivot = A[j, j]
        if is_zero_pivot(pivot, pivot_tol):
            raise EliminationFailure(j)

        pivot_tail = tail(A[j], j)
        for i in range(j + 1, n):
            mult = A[i, j] / pivot
            scale_and_add(pivot_tail, -mult, tail(A[i], j))
            A[i, j] = 0.0  # exact zero; rounding may leave a tiny remainder
            b[i] -= mult * b[j]

    return A, b
