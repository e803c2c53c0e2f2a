# gausselim/linalg/arrays.py
"""
Coercion and shape checks for dense square systems.
"""

from __future__ import annotations

from typing import Any

import numpy as np

__all__ = ["as_matrix", "as_vector", "check_system"]


def as_matrix(obj: Any, *, copy: bool = True) -> np.ndarray:
    """Coerce ``obj`` to a float64 ``(n, n)`` array.

    With ``copy=False`` a float64 ndarray is returned as-is (same object).
    """
    try:
        A = np.array(obj, dtype=np.float64, copy=True) if copy else np.asarray(obj, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Matrix entries must be real numbers: {exc}") from exc
    if A.ndim != 2:
        raise ValueError(f"Matrix must be 2-D, got ndim={A.ndim}")
    if A.shape[0] != A.shape[1]:
        raise ValueError(f"Matrix must be square, got shape {A.shape}")
    return A


def as_vector(obj: Any, *, copy: bool = True) -> np.ndarray:
    """Coerce ``obj`` to a float64 ``(n,)`` array."""
    try:
        v = np.array(obj, dtype=np.float64, copy=True) if copy else np.asarray(obj, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Vector entries must be real numbers: {exc}") from exc
    if v.ndim != 1:
        raise ValueError(f"Vector must be 1-D, got ndim={v.ndim}")
    return v


def check_system(A: np.ndarray, b: np.ndarray, *, writable: bool = False) -> int:
    """
    Validate a square system and return its dimension ``n``.

    ``writable=True`` additionally requires floating-point ndarrays that can
    be updated in place (integer arrays would silently truncate).
    """
    if not isinstance(A, np.ndarray) or not isinstance(b, np.ndarray):
        raise TypeError("A and b must be numpy arrays")
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"Matrix must be square, got shape {A.shape}")
    n = A.shape[0]
    if b.shape != (n,):
        raise ValueError(f"Right-hand side dimension mismatch: expected ({n},), got {b.shape}")
    if writable:
        for name, arr in (("A", A), ("b", b)):
            if not np.issubdtype(arr.dtype, np.floating):
                raise TypeError(f"{name} must have a floating dtype for in-place elimination, got {arr.dtype}")
            if not arr.flags.writeable:
                raise ValueError(f"{name} is read-only")
    return n
