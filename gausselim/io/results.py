# -*- coding: utf-8 -*-
"""
Results IO helpers.

Write:
  * metrics.json  (run-level counts and worst residual)
  * trials.csv    (one row per random system)
  * system_n<k>.npz (A, b, x of a trial, optional)
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict

import numpy as np
import pandas as pd


def write_metrics(run_dir: Path, metrics: Dict[str, Any]) -> Path:
    run_dir.mkdir(parents=True, exist_ok=True)
    out = run_dir / "metrics.json"
    with open(out, "w") as f:
        json.dump(metrics, f, indent=2, sort_keys=True)
    return out


def write_trials_csv(run_dir: Path, frame: pd.DataFrame) -> Path:
    run_dir.mkdir(parents=True, exist_ok=True)
    out = run_dir / "trials.csv"
    frame.to_csv(out, index=False)
    return out


def save_system_npz(run_dir: Path, name: str, **arrays) -> Path:
    """
    Save arrays of one system (e.g. A, b, x, Ax) as ``<name>.npz``.
    """
    run_dir.mkdir(parents=True, exist_ok=True)
    out = run_dir / f"{name}.npz"
    np.savez_compressed(out, **arrays)
    return out
