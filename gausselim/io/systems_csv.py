# -*- coding: utf-8 -*-
"""
Load a linear system from a header-less CSV of the augmented matrix [A | b].

Example (3×3):
  2,1,1,4
  1,3,2,5
  1,0,0,6
"""
from __future__ import annotations
from pathlib import Path
from typing import Tuple

import numpy as np
import pandas as pd


def load_system_csv(csv_path: Path) -> Tuple[np.ndarray, np.ndarray]:
    df = pd.read_csv(csv_path, header=None, skipinitialspace=True)
    try:
        aug = df.to_numpy(dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{csv_path}: non-numeric entry in system CSV") from exc
    n, cols = aug.shape
    if cols != n + 1:
        raise ValueError(f"{csv_path}: expected n×(n+1) augmented matrix, got {n}×{cols}")
    if np.isnan(aug).any():
        raise ValueError(f"{csv_path}: missing entries in system CSV")
    A = np.ascontiguousarray(aug[:, :n])
    b = np.ascontiguousarray(aug[:, n])
    return A, b
