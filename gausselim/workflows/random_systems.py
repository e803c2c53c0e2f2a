# -*- coding: utf-8 -*-
"""
Random matrices/vectors for demonstration runs.

Entries are uniform in [0, n), so for the default (non-dominant) systems
zero pivots are possible but unlikely; larger n tends to give worse
conditioned systems without pivoting.
"""
from __future__ import annotations

from typing import Optional

import numpy as np

__all__ = ["make_rng", "random_vector", "random_matrix", "diagonally_dominant_matrix"]


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


def random_vector(n: int, rng: np.random.Generator) -> np.ndarray:
    if n < 0:
        raise ValueError(f"dimension must be >= 0, got {n}")
    return float(n) * rng.random(n)


def random_matrix(n: int, rng: np.random.Generator) -> np.ndarray:
    """n×n matrix whose rows are independent random_vector(n) draws."""
    M = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        M[i] = random_vector(n, rng)
    return M


def diagonally_dominant_matrix(n: int, rng: np.random.Generator) -> np.ndarray:
    """
    Random matrix with |A[i,i]| > sum of the other |A[i,k]| in its row.

    No zero pivot can appear under elimination without row swaps, so these
    systems always solve.
    """
    M = random_matrix(n, rng)
    off = np.abs(M).sum(axis=1) - np.abs(np.diag(M))
    np.fill_diagonal(M, off + 1.0 + rng.random(n))
    return M
