# gausselim/linalg/residual.py
"""
Matrix-vector product and residual checks for a computed solution.
"""

from __future__ import annotations

import numpy as np

from gausselim.linalg.slices import dot_product

__all__ = ["matvec", "residual", "residual_norm", "relative_residual"]


def matvec(A: np.ndarray, x: np.ndarray) -> np.ndarray:
    """Row-by-row ``A · x`` as a new float64 vector."""
    n = A.shape[0]
    if A.ndim != 2 or x.shape != (A.shape[1],):
        raise ValueError(f"matvec shape mismatch: {A.shape} · {x.shape}")
    v = np.empty(n, dtype=np.float64)
    for i in range(n):
        v[i] = dot_product(A[i], x)
    return v


def residual(A: np.ndarray, x: np.ndarray, b: np.ndarray) -> np.ndarray:
    return matvec(A, x) - b


def _inf_norm(x: np.ndarray) -> float:
    if x.size == 0:
        return 0.0
    return float(np.linalg.norm(x, ord=np.inf))


def residual_norm(A: np.ndarray, x: np.ndarray, b: np.ndarray) -> float:
    """||A·x - b||_inf"""
    return _inf_norm(residual(A, x, b))


def relative_residual(A: np.ndarray, x: np.ndarray, b: np.ndarray) -> float:
    """||A·x - b||_inf / ||b||_inf, guarded against a zero right-hand side."""
    scale = max(_inf_norm(b), np.finfo(np.float64).tiny)
    return residual_norm(A, x, b) / scale
