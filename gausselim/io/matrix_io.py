# gausselim/io/matrix_io.py
"""
Brace-delimited text rendering of vectors and matrices.

  vector:  { 1 2 3 }
  matrix:  {
           { 1 2 }
           { 3 4 }
           }
"""
from __future__ import annotations

import numpy as np

__all__ = ["format_scalar", "format_vector", "format_matrix"]


def format_scalar(value: float, precision: int = 6) -> str:
    return format(float(value), f".{int(precision)}g")


def format_vector(v: np.ndarray, precision: int = 6) -> str:
    v = np.asarray(v)
    if v.ndim != 1:
        raise ValueError(f"format_vector expects a 1-D array, got ndim={v.ndim}")
    body = "".join(f" {format_scalar(e, precision)}" for e in v)
    return "{" + body + " }"


def format_matrix(M: np.ndarray, precision: int = 6) -> str:
    M = np.asarray(M)
    if M.ndim != 2:
        raise ValueError(f"format_matrix expects a 2-D array, got ndim={M.ndim}")
    rows = [format_vector(row, precision) for row in M]
    return "{\n" + "".join(r + "\n" for r in rows) + "}"
