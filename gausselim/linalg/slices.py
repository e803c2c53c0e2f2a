# gausselim/linalg/slices.py
"""
Row-slice primitives used by elimination and back substitution.

A row slice is the contiguous tail ``row[start:]`` of a 1-D array. It is a
numpy view, so writes through it land in the parent matrix/vector.
"""

from __future__ import annotations

import numpy as np

__all__ = ["tail", "scale_and_add", "dot_product"]


def tail(row: np.ndarray, start: int) -> np.ndarray:
    """Return the view ``row[start:]`` (empty when ``start == row.size``)."""
    if not isinstance(row, np.ndarray) or row.ndim != 1:
        raise ValueError("tail() expects a 1-D ndarray")
    if start < 0 or start > row.size:
        raise ValueError(f"slice start {start} outside [0, {row.size}]")
    return row[start:]


def scale_and_add(x: np.ndarray, a: float, y: np.ndarray) -> np.ndarray:
    """
    In-place ``y := a*x + y``.

    Parameters
    ----------
    x : np.ndarray
        Source slice, read only.
    a : float
        Scale applied to ``x``.
    y : np.ndarray
        Destination slice; updated in place and returned.
    """
    if x.shape != y.shape:
        raise ValueError(f"scale_and_add shape mismatch: {x.shape} vs {y.shape}")
    y += a * x
    return y


def dot_product(x: np.ndarray, y: np.ndarray) -> float:
    if x.shape != y.shape:
        raise ValueError(f"dot_product shape mismatch: {x.shape} vs {y.shape}")
    if x.size == 0:
        return 0.0
    return float(np.dot(x, y))
