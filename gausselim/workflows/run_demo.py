# -*- coding: utf-8 -*-
"""
Demo workflow wiring settings → random trials → report files.
"""
from __future__ import annotations
from typing import List

import numpy as np

from gausselim.io.config import TrialSettings
from gausselim.io.results import save_system_npz, write_metrics, write_trials_csv
from gausselim.utils import logger
from gausselim.workflows.trials import TrialRecord, run_trials, trials_frame


def summarize(records: List[TrialRecord]) -> dict:
    solved = [r for r in records if r.ok]
    worst = max((r.relative_residual for r in solved), default=float("nan"))
    return {
        "trials": len(records),
        "solved": len(solved),
        "elimination_failures": sum(r.stage == "elimination" for r in records),
        "back_substitution_failures": sum(r.stage == "back_substitution" for r in records),
        "worst_relative_residual": None if np.isnan(worst) else float(worst),
    }


def run_with_settings(settings: TrialSettings, *, echo: bool = True) -> List[TrialRecord]:
    records = run_trials(
        settings.dims,
        settings.seed,
        dominant=settings.dominant,
        pivot_tol=settings.pivot_tol,
        precision=settings.precision,
        echo=echo,
    )
    metrics = summarize(records)
    logger.info(f"[run] {metrics['solved']}/{metrics['trials']} systems solved")

    out_dir = settings.out_dir
    if out_dir is None:
        return records

    frame = trials_frame(records)
    write_trials_csv(out_dir, frame)
    write_metrics(out_dir, metrics)
    for k, r in enumerate(records):
        arrays = {"A": r.A, "b": r.b}
        if r.ok:
            arrays["x"] = r.x
        save_system_npz(out_dir, f"system_{k:02d}_n{r.n}", **arrays)

    if settings.plot:
        import matplotlib.pyplot as plt
        from gausselim.viz.plots import plot_residuals

        fig, _ax = plot_residuals(frame)
        fig.savefig(out_dir / "residuals.png", dpi=180)
        plt.close(fig)
    logger.info(f"[run] wrote results to: {out_dir}")
    return records

