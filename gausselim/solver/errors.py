# gausselim/solver/errors.py
"""Failure types raised by the classical elimination solver."""

from __future__ import annotations

__all__ = ["SolverFailure", "EliminationFailure", "BackSubstitutionFailure"]


class SolverFailure(RuntimeError):
    """Base class: a zero pivot/diagonal aborted the solve at ``row``."""

    stage = "solve"

    def __init__(self, row: int, message: str | None = None):
        self.row = int(row)
        super().__init__(message or f"{self.stage} failure in row {self.row}")


class EliminationFailure(SolverFailure):
    """Zero pivot met during forward elimination (no row swap is tried)."""

    stage = "elimination"

    def __init__(self, row: int):
        super().__init__(row, f"Elimination failure in row {int(row)}")


class BackSubstitutionFailure(SolverFailure):
    """Zero diagonal entry met during back substitution."""

    stage = "back_substitution"

    def __init__(self, row: int):
        super().__init__(row, f"Back substitution failure in row {int(row)}")
