# gausselim/main.py
"""
gausselim main entrypoint.

Default subcommand: trials
Usage examples:
    python -m gausselim
    python -m gausselim trials --dims 3 4 5 --seed 7
    python -m gausselim trials --config demo.yaml --out runs/demo --plot
    python -m gausselim solve system.csv
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple
import argparse
import sys

from .io.config import DEFAULT_DIMS, TrialSettings, build_trial_settings, load_config
from .io.matrix_io import format_matrix, format_vector
from .io.systems_csv import load_system_csv
from .linalg.residual import matvec, relative_residual
from .solver.errors import SolverFailure
from .solver.gaussian import solve
from .utils import logger
from .workflows.run_demo import run_with_settings

__all__ = ["main"]


# ----------------------------- trials subcommand -----------------------------


def _check_pivot_tol(value: Optional[float]) -> None:
    if value is not None and value < 0.0:
        raise ValueError(f"--pivot-tol must be >= 0, got {value}")


def _add_trials_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser(
        "trials", help="Solve random systems of a few sizes and print the results"
    )
    p.add_argument("--config", type=Path, default=None, help="YAML run configuration")
    p.add_argument(
        "--dims", type=int, nargs="+", default=None,
        help=f"System sizes (default: {' '.join(map(str, DEFAULT_DIMS))})"
    )
    p.add_argument("--seed", type=int, default=None, help="Random seed")
    p.add_argument(
        "--dominant", action="store_true",
        help="Make A strictly diagonally dominant (never hits a zero pivot)"
    )
    p.add_argument(
        "--pivot-tol", type=float, default=None,
        help="Treat |pivot| <= tol as zero (default 0: exact test)"
    )
    p.add_argument("--precision", type=int, default=None, help="Significant digits printed")
    p.add_argument("--out", type=Path, default=None, help="Directory for metrics/CSV/npz")
    p.add_argument("--plot", action="store_true", help="Also write residuals.png (needs --out)")
    p.add_argument("--quiet", action="store_true", help="Do not echo A, b, x")
    p.add_argument("--debug", action="store_true", help="Verbose diagnostics")
    p.set_defaults(cmd="trials")
    return p


def _settings_from_args(ns: argparse.Namespace) -> TrialSettings:
    _check_pivot_tol(ns.pivot_tol)
    base = build_trial_settings(load_config(ns.config)) if ns.config else TrialSettings()
    return TrialSettings(
        dims=tuple(ns.dims) if ns.dims else base.dims,
        seed=ns.seed if ns.seed is not None else base.seed,
        dominant=bool(ns.dominant) or base.dominant,
        pivot_tol=ns.pivot_tol if ns.pivot_tol is not None else base.pivot_tol,
        out_dir=ns.out if ns.out is not None else base.out_dir,
        precision=ns.precision if ns.precision is not None else base.precision,
        plot=bool(ns.plot) or base.plot,
    )


def _run_trials(settings: TrialSettings, *, echo: bool = True) -> int:
    if any(n <= 0 for n in settings.dims):
        raise ValueError(f"--dims must be positive, got {list(settings.dims)}")
    if settings.plot and settings.out_dir is None:
        logger.warn("--plot ignored without an output directory")
    run_with_settings(settings, echo=echo)
    # failures are reported per trial; the demo itself always succeeds
    return 0


# ------------------------------ solve subcommand -----------------------------


@dataclass(slots=True)
class _SolveArgs:
    system_csv: Path
    pivot_tol: float
    precision: int


def _add_solve_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser(
        "solve", help="Solve a system stored as an augmented-matrix CSV [A | b]"
    )
    p.add_argument("system", type=Path, help="Header-less CSV, n rows × (n+1) columns")
    p.add_argument("--pivot-tol", type=float, default=0.0, help="Zero-pivot tolerance")
    p.add_argument("--precision", type=int, default=6, help="Significant digits printed")
    p.add_argument("--debug", action="store_true", help="Verbose diagnostics")
    p.set_defaults(cmd="solve")
    return p


def _run_solve(args: _SolveArgs) -> int:
    _check_pivot_tol(args.pivot_tol)
    A, b = load_system_csv(args.system_csv)
    print(f"A = {format_matrix(A, args.precision)}")
    print(f"b = {format_vector(b, args.precision)}")
    try:
        x = solve(A, b, pivot_tol=args.pivot_tol)
    except SolverFailure as exc:
        logger.error(str(exc))
        return 1
    print(f"classical elim solution is x = {format_vector(x, args.precision)}")
    print(f" A * x = {format_vector(matvec(A, x), args.precision)}")
    logger.debug(f"relative residual {relative_residual(A, x, b):.3e}")
    return 0


# --------------------------------- main() ------------------------------------


def _build_parser() -> Tuple[argparse.ArgumentParser, argparse.ArgumentParser]:
    parser = argparse.ArgumentParser(
        description="gausselim — classical Gaussian elimination demos"
    )
    sub = parser.add_subparsers(dest="cmd")
    trials_parser = _add_trials_subparser(sub)
    _add_solve_subparser(sub)
    return parser, trials_parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser, trials_parser = _build_parser()

    # If no subcommand given, default to 'trials' with defaults
    if not argv:
        ns = trials_parser.parse_args([])
        return _run_trials(_settings_from_args(ns))

    ns = parser.parse_args(argv)
    logger.set_debug(getattr(ns, "debug", False))
    try:
        if ns.cmd == "trials":
            return _run_trials(_settings_from_args(ns), echo=not ns.quiet)
        if ns.cmd == "solve":
            return _run_solve(
                _SolveArgs(
                    system_csv=ns.system,
                    pivot_tol=float(ns.pivot_tol),
                    precision=int(ns.precision),
                )
            )
    except (OSError, ValueError) as exc:
        logger.error(str(exc))
        return 2

    parser.error("Unknown command (try: trials, solve)")
    return 2


if __name__ == "__main__":
    sys.exit(main())
