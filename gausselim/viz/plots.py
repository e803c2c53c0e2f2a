# gausselim/viz/plots.py
"""
Residual plot for a batch of random-system trials.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

__all__ = ["plot_residuals"]

_FLOOR = 1e-18  # exact solves would vanish on a log axis


def plot_residuals(
    frame: pd.DataFrame,
    *,
    ax: plt.Axes | None = None,
    title: str | None = "Classical elimination residuals",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Bar chart of relative residual ||Ax-b||/||b|| per trial (log scale).

    Parameters
    ----------
    frame : pandas.DataFrame
        Output of ``trials_frame``; needs columns n, ok, relative_residual.
    ax : matplotlib Axes, optional
        If provided, plot into this axes; otherwise create a new figure.
    title : str, optional

    Returns
    -------
    fig, ax : matplotlib Figure and Axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6.0, 3.2), constrained_layout=True)
    else:
        fig = ax.figure

    pos = np.arange(len(frame))
    ok = frame["ok"].to_numpy(dtype=bool)
    rel = frame["relative_residual"].to_numpy(dtype=np.float64)
    heights = np.where(ok, np.maximum(np.nan_to_num(rel, nan=_FLOOR), _FLOOR), _FLOOR)

    ax.bar(pos[ok], heights[ok], color="tab:blue", label="solved")
    if (~ok).any():
        ax.bar(pos[~ok], heights[~ok], color="tab:red", label="failed")
        for p in pos[~ok]:
            ax.annotate("fail", (p, _FLOOR), ha="center", va="bottom", fontsize=8)

    ax.set_yscale("log")
    ax.set_xticks(pos)
    ax.set_xticklabels([f"n={int(n)}" for n in frame["n"]])
    ax.set_ylabel("||Ax-b||∞ / ||b||∞")
    if title:
        ax.set_title(title)
    ax.grid(True, which="both", axis="y", linestyle=":", linewidth=0.6)
    if len(frame):
        ax.legend(frameon=False, loc="best")

    return fig, ax
