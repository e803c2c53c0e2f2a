# gausselim/solver/back_substitution.py
"""
Back substitution for an upper-triangular system (A, b).
"""

from __future__ import annotations

import numpy as np

from gausselim.linalg.arrays import check_system
from gausselim.linalg.slices import tail, dot_product
from gausselim.solver.elimination import is_zero_pivot
from gausselim.solver.errors import BackSubstitutionFailure

__all__ = ["back_substitute"]


def back_substitute(A: np.ndarray, b: np.ndarray, *, pivot_tol: float = 0.0) -> np.ndarray:
    """Solve ``A x = b`` for upper-triangular ``A``; inputs are only read.

    Entries below the diagonal are ignored. Raises BackSubstitutionFailure
    at the last (highest-index) row whose diagonal is zero.
    """
    n = check_system(A, b)
    x = np.zeros(n, dtype=np.float64)

    for i in range(n - 1, -1, -1):
        s = b[i] - dot_product(tail(A[i], i + 1), tail(x, i + 1))
        m = A[i, i]
        if is_zero_pivot(m, pivot_tol):
            raise BackSubstitutionFailure(i)
        x[i] = s / m

    return x
