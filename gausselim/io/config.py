# gausselim/io/config.py
# -*- coding: utf-8 -*-
"""
YAML → TrialSettings for the random-system driver.

Schema (example):

trials:
  dims: [3, 4, 5]
  seed: 12345        # optional; omit/null for a fresh random stream
  dominant: false    # make A strictly diagonally dominant

solver:
  pivot_tol: 0.0     # 0.0 = exact zero-pivot test

output:
  dir: runs/demo     # optional; nothing written when absent
  precision: 6
  plot: false
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml

DEFAULT_DIMS: Tuple[int, ...] = (3, 4, 5)


@dataclass
class RunConfig:
    raw: dict
    path: Path


@dataclass(frozen=True)
class TrialSettings:
    dims: Tuple[int, ...] = DEFAULT_DIMS
    seed: Optional[int] = None
    dominant: bool = False
    pivot_tol: float = 0.0
    out_dir: Optional[Path] = None
    precision: int = 6
    plot: bool = False


def load_config(path: Path) -> RunConfig:
    data = yaml.safe_load(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("Top-level YAML must be a mapping")
    _validate_minimum(data)
    return RunConfig(raw=data, path=Path(path))


def build_trial_settings(cfg: RunConfig) -> TrialSettings:
    t = cfg.raw["trials"] or {}
    s = cfg.raw.get("solver") or {}
    o = cfg.raw.get("output") or {}

    dims = tuple(int(n) for n in t.get("dims", DEFAULT_DIMS))
    if not dims:
        raise ValueError("trials.dims is empty")
    if any(n <= 0 for n in dims):
        raise ValueError(f"trials.dims must be positive, got {list(dims)}")

    seed = t.get("seed")
    pivot_tol = float(s.get("pivot_tol", 0.0))
    if pivot_tol < 0.0:
        raise ValueError("solver.pivot_tol must be >= 0")
    out_dir = o.get("dir")

    return TrialSettings(
        dims=dims,
        seed=int(seed) if seed is not None else None,
        dominant=bool(t.get("dominant", False)),
        pivot_tol=pivot_tol,
        out_dir=Path(out_dir) if out_dir else None,
        precision=int(o.get("precision", 6)),
        plot=bool(o.get("plot", False)),
    )


def _validate_minimum(cfg: dict) -> None:
    for key in ("trials",):
        if key not in cfg:
            raise ValueError(f"Missing top-level key: {key}")
