# gausselim/solver/gaussian.py
"""
solve(A, b) = back_substitute(*eliminate(A, b)).

The caller's arrays are copied first unless ``overwrite=True``.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from gausselim.linalg.arrays import as_matrix, as_vector
from gausselim.solver.back_substitution import back_substitute
from gausselim.solver.elimination import eliminate

__all__ = ["solve", "classical_gaussian_elimination"]


def solve(
    A: Any,
    b: Any,
    *,
    overwrite: bool = False,
    pivot_tol: float = 0.0,
) -> np.ndarray:
    """
    Solve the dense square system ``A x = b`` by classical (non-pivoting)
    Gaussian elimination and back substitution.

    Parameters
    ----------
    A : array_like, shape (n, n)
    b : array_like, shape (n,)
    overwrite : bool
        If True and ``A``/``b`` are already float64 ndarrays, they are
        reduced in place and the caller sees the triangular system
        afterwards. Other inputs are always converted into new arrays.
    pivot_tol : float
        Forwarded to both stages; 0.0 means exact-zero detection.

    Returns
    -------
    x : np.ndarray, shape (n,)

    Raises
    ------
    EliminationFailure, BackSubstitutionFailure
        Propagated unchanged from the stage that hit a zero.
    ValueError
        On non-square ``A`` or mismatched ``b``.
    """
    copy = not overwrite
    A_work = as_matrix(A, copy=copy)
    b_work = as_vector(b, copy=copy)
    if b_work.shape[0] != A_work.shape[0]:
        raise ValueError(
            f"Right-hand side dimension mismatch: expected ({A_work.shape[0]},), got {b_work.shape}"
        )

    eliminate(A_work, b_work, pivot_tol=pivot_tol)
    return back_substitute(A_work, b_work, pivot_tol=pivot_tol)


# Alias keeping the original demo program's name for this routine.
classical_gaussian_elimination = solve
