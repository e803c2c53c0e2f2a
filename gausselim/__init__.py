# gausselim/__init__.py
"""
gausselim: classical (non-pivoting) Gaussian elimination for small dense
square systems, plus a random-system demo driver.
"""
from __future__ import annotations
from .solver import (
    SolverFailure,
    EliminationFailure,
    BackSubstitutionFailure,
    eliminate,
    back_substitute,
    solve,
)

__version__ = "0.1.0"

__all__ = [
    "SolverFailure",
    "EliminationFailure",
    "BackSubstitutionFailure",
    "eliminate",
    "back_substitute",
    "solve",
]
