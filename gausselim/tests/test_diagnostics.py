# -*- coding: utf-8 -*-
"""
Test: debug diagnostics stay silent unless enabled.
"""
import numpy as np

from gausselim.utils import diagnostics as diag
from gausselim.utils import logger


def test_dominance_check():
    assert diag.is_strictly_diagonally_dominant(np.array([[3.0, 1.0], [1.0, 2.5]]))
    assert not diag.is_strictly_diagonally_dominant(np.array([[1.0, 1.0], [0.0, 1.0]]))
    assert diag.min_abs_diagonal(np.array([[-0.5, 9.0], [9.0, 2.0]])) == 0.5


def test_debug_gate(capsys):
    A, b = np.eye(2), np.ones(2)
    diag.log_system_summary(A=A, b=b)
    assert capsys.readouterr().out == ""

    logger.set_debug(True)
    try:
        diag.log_system_summary(A=A, b=b)
        diag.log_failure(stage="elimination", row=0, n=2)
    finally:
        logger.set_debug(False)
    out = capsys.readouterr().out
    assert "DEBUG: [diag] n=2" in out
    assert "diag-dominant=True" in out
    assert "elimination stopped at row 0 of 2" in out


def test_summaries_skip_work_when_debug_is_off(monkeypatch, capsys):
    def _boom(*_args, **_kw):
        raise AssertionError("summary computed with debug off")

    monkeypatch.setattr(logger, "_DEBUG", False)
    monkeypatch.setattr(diag, "is_strictly_diagonally_dominant", _boom)
    monkeypatch.setattr(diag, "_fmt_range", _boom)
    diag.log_system_summary(A=np.eye(2), b=np.ones(2))
    diag.log_solution_summary(x=np.ones(2), res_inf=0.0, rel_res=0.0)
    assert capsys.readouterr().out == ""
