# gausselim/linalg/__init__.py
from __future__ import annotations
from .slices import tail, scale_and_add, dot_product
from .arrays import as_matrix, as_vector, check_system
from .residual import matvec, residual, residual_norm, relative_residual

__all__ = [
    "tail", "scale_and_add", "dot_product",
    "as_matrix", "as_vector", "check_system",
    "matvec", "residual", "residual_norm", "relative_residual",
]
