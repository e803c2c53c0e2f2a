# -*- coding: utf-8 -*-
"""
Random-system trials: build A and b, echo them, solve, echo x and A·x.

Solver failures are reported on stderr and recorded, never re-raised, so a
demo run always finishes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from gausselim.io.matrix_io import format_matrix, format_vector
from gausselim.linalg.residual import matvec, relative_residual, residual_norm
from gausselim.solver.errors import SolverFailure
from gausselim.solver.gaussian import solve
from gausselim.utils import diagnostics as diag
from gausselim.utils import logger
from gausselim.workflows.random_systems import (
    diagonally_dominant_matrix,
    make_rng,
    random_matrix,
    random_vector,
)

__all__ = ["TrialRecord", "solve_random_system", "run_trials", "trials_frame"]


@dataclass
class TrialRecord:
    n: int
    A: np.ndarray
    b: np.ndarray
    seed: Optional[int] = None
    x: Optional[np.ndarray] = None
    Ax: Optional[np.ndarray] = None
    residual_inf: float = float("nan")
    relative_residual: float = float("nan")
    error: Optional[str] = None
    stage: Optional[str] = None
    error_row: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def solve_random_system(
    n: int,
    rng: np.random.Generator,
    *,
    dominant: bool = False,
    pivot_tol: float = 0.0,
    precision: int = 6,
    echo: bool = True,
    seed: Optional[int] = None,
) -> TrialRecord:
    """One random system of size n; ``seed`` is the run seed, recorded only."""
    A = diagonally_dominant_matrix(n, rng) if dominant else random_matrix(n, rng)
    b = random_vector(n, rng)

    if echo:
        print(f"A = {format_matrix(A, precision)}")
        print(f"b = {format_vector(b, precision)}")
    diag.log_system_summary(A=A, b=b)

    rec = TrialRecord(n=n, A=A, b=b, seed=seed)
    try:
        x = solve(A, b, pivot_tol=pivot_tol)
    except SolverFailure as exc:
        logger.error(str(exc))
        diag.log_failure(stage=exc.stage, row=exc.row, n=n)
        rec.error, rec.stage, rec.error_row = str(exc), exc.stage, exc.row
        return rec

    rec.x = x
    rec.Ax = matvec(A, x)
    rec.residual_inf = residual_norm(A, x, b)
    rec.relative_residual = relative_residual(A, x, b)
    if echo:
        print(f"classical elim solution is x = {format_vector(x, precision)}")
        print(f" A * x = {format_vector(rec.Ax, precision)}")
    diag.log_solution_summary(x=x, res_inf=rec.residual_inf, rel_res=rec.relative_residual)
    return rec


def run_trials(
    dims: Iterable[int] = (3, 4, 5),
    seed: Optional[int] = None,
    *,
    dominant: bool = False,
    pivot_tol: float = 0.0,
    precision: int = 6,
    echo: bool = True,
) -> List[TrialRecord]:
    """One trial per entry of ``dims``, all drawn from one seeded stream."""
    rng = make_rng(seed)
    return [
        solve_random_system(
            int(n), rng,
            dominant=dominant, pivot_tol=pivot_tol, precision=precision, echo=echo,
            seed=seed,
        )
        for n in dims
    ]


def trials_frame(records: Iterable[TrialRecord]) -> pd.DataFrame:
    rows = [
        {
            "n": r.n,
            "seed": r.seed,
            "ok": r.ok,
            "stage": r.stage,
            "error_row": r.error_row,
            "residual_inf": r.residual_inf,
            "relative_residual": r.relative_residual,
        }
        for r in records
    ]
    return pd.DataFrame(
        rows,
        columns=["n", "seed", "ok", "stage", "error_row", "residual_inf", "relative_residual"],
    )
