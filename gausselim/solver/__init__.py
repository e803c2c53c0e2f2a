# gausselim/solver/__init__.py
from __future__ import annotations
from .errors import SolverFailure, EliminationFailure, BackSubstitutionFailure
from .elimination import eliminate
from .back_substitution import back_substitute
from .gaussian import solve, classical_gaussian_elimination

__all__ = [
    "SolverFailure", "EliminationFailure", "BackSubstitutionFailure",
    "eliminate", "back_substitute", "solve", "classical_gaussian_elimination",
]
