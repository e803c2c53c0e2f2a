# -*- coding: utf-8 -*-
"""
Random-system generation and the demo trial driver.
"""
from __future__ import annotations

import matplotlib
matplotlib.use("Agg")

import numpy as np

from gausselim.io.config import TrialSettings
from gausselim.utils.diagnostics import is_strictly_diagonally_dominant
from gausselim.workflows import trials
from gausselim.workflows.random_systems import (
    diagonally_dominant_matrix,
    make_rng,
    random_matrix,
    random_vector,
)
from gausselim.workflows.run_demo import run_with_settings, summarize


def test_random_entries_lie_in_zero_to_n():
    rng = make_rng(5)
    v = random_vector(4, rng)
    M = random_matrix(4, rng)
    assert v.shape == (4,) and M.shape == (4, 4)
    assert np.all((v >= 0.0) & (v < 4.0))
    assert np.all((M >= 0.0) & (M < 4.0))


def test_seed_reproduces_systems():
    a = random_matrix(3, make_rng(9))
    b = random_matrix(3, make_rng(9))
    assert np.array_equal(a, b)


def test_dominant_matrix_is_dominant():
    for n in (1, 2, 7):
        assert is_strictly_diagonally_dominant(diagonally_dominant_matrix(n, make_rng(n)))


def test_run_trials_echoes_and_solves(capsys):
    records = trials.run_trials((3, 4, 5), seed=1, dominant=True)
    out = capsys.readouterr().out

    assert [r.n for r in records] == [3, 4, 5]
    assert all(r.ok for r in records)
    assert out.count("A = {") == 3
    assert out.count("classical elim solution is x = {") == 3
    assert out.count(" A * x = {") == 3
    for r in records:
        np.testing.assert_allclose(r.Ax, r.b, rtol=1e-9, atol=1e-9)
        assert r.relative_residual < 1e-9


def test_quiet_trials_print_nothing(capsys):
    trials.run_trials((2,), seed=0, dominant=True, echo=False)
    assert capsys.readouterr().out == ""


def test_failure_is_reported_not_raised(monkeypatch, capsys):
    monkeypatch.setattr(
        trials, "random_matrix", lambda n, rng: np.array([[0.0, 1.0], [1.0, 0.0]])
    )
    rec = trials.solve_random_system(2, make_rng(0))
    captured = capsys.readouterr()

    assert not rec.ok
    assert rec.stage == "elimination"
    assert rec.error_row == 0
    assert rec.x is None
    assert "ERROR: Elimination failure in row 0" in captured.err
    assert "classical elim solution" not in captured.out


def test_trials_frame_columns():
    records = trials.run_trials((2, 3), seed=4, dominant=True, echo=False)
    frame = trials.trials_frame(records)
    assert list(frame.columns) == [
        "n", "seed", "ok", "stage", "error_row", "residual_inf", "relative_residual"
    ]
    assert frame["n"].tolist() == [2, 3]
    assert frame["seed"].tolist() == [4, 4]
    assert frame["ok"].all()


def test_summarize_counts_failures(monkeypatch):
    monkeypatch.setattr(
        trials, "random_matrix", lambda n, rng: np.array([[1.0, 2.0], [2.0, 4.0]])
    )
    records = trials.run_trials((2, 2), seed=0, echo=False)
    m = summarize(records)
    # second row becomes all zeros: caught in back substitution
    assert m["trials"] == 2
    assert m["solved"] == 0
    assert m["back_substitution_failures"] == 2
    assert m["worst_relative_residual"] is None


def test_run_with_settings_writes_outputs(tmp_path):
    out_dir = tmp_path / "demo"
    settings = TrialSettings(dims=(2, 3), seed=3, dominant=True, out_dir=out_dir, plot=True)
    records = run_with_settings(settings, echo=False)

    assert len(records) == 2
    assert (out_dir / "metrics.json").exists()
    assert (out_dir / "trials.csv").exists()
    assert (out_dir / "system_00_n2.npz").exists()
    assert (out_dir / "system_01_n3.npz").exists()
    assert (out_dir / "residuals.png").exists()


def test_records_carry_the_run_seed():
    records = trials.run_trials((2, 3), seed=17, dominant=True, echo=False)
    assert [r.seed for r in records] == [17, 17]
    unseeded = trials.run_trials((2,), dominant=True, echo=False)
    assert unseeded[0].seed is None
