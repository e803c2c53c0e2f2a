"""
gausselim/utils/diagnostics.py

Compact one-line summaries of a system before/after a solve.
Called from the trial driver when debug=True.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from gausselim.utils import logger


def _fmt_range(x: np.ndarray, name: str) -> str:
    if x.size == 0:
        return f"{name}: (empty)"
    return f"{name}∈[{np.min(x):+.3e},{np.max(x):+.3e}]"


def min_abs_diagonal(A: np.ndarray) -> float:
    d = np.abs(np.diag(A))
    return float(d.min()) if d.size else float("nan")


def is_strictly_diagonally_dominant(A: np.ndarray) -> bool:
    """|A[i,i]| > sum_{k != i} |A[i,k]| for every row."""
    absA = np.abs(A)
    diag = np.diag(absA)
    off = absA.sum(axis=1) - diag
    return bool(np.all(diag > off))


def log_system_summary(
    *,
    A: np.ndarray,
    b: np.ndarray,
    prefix: str = "[diag]",
) -> None:
    """Ranges of A and b, smallest |diagonal| and dominance flag."""
    if not logger.is_debug():
        return
    msg = [
        f"n={A.shape[0]}",
        _fmt_range(A, "A"),
        _fmt_range(b, "b"),
        f"min|diag|={min_abs_diagonal(A):.3e}",
        f"diag-dominant={is_strictly_diagonally_dominant(A)}",
    ]
    logger.debug(f"{prefix} " + " | ".join(msg))


def log_solution_summary(
    *,
    x: np.ndarray,
    res_inf: float,
    rel_res: Optional[float] = None,
    prefix: str = "[sol]",
) -> None:
    if not logger.is_debug():
        return
    rel_txt = f" rel={rel_res:.3e}" if rel_res is not None else ""
    logger.debug(f"{prefix} {_fmt_range(x, 'x')} | ||Ax-b||_inf={res_inf:.3e}{rel_txt}")


def log_failure(*, stage: str, row: int, n: int, prefix: str = "[sol]") -> None:
    logger.debug(f"{prefix} {stage} stopped at row {row} of {n}")
