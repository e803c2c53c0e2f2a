# gausselim/tests/test_back_substitution.py
from __future__ import annotations

import numpy as np
import pytest

from gausselim.solver import BackSubstitutionFailure, back_substitute


def test_solves_upper_triangular_system():
    A = np.array([[2.0, 1.0, -1.0], [0.0, 4.0, 2.0], [0.0, 0.0, 5.0]])
    b = np.array([1.0, 10.0, 10.0])
    x = back_substitute(A, b)
    # x2 = 2, x1 = (10 - 4) / 4, x0 = (1 - 1.5 + 2) / 2
    np.testing.assert_array_equal(x, [0.75, 1.5, 2.0])


def test_inputs_are_read_only():
    A = np.array([[2.0, 1.0], [0.0, 4.0]])
    b = np.array([3.0, 8.0])
    A0, b0 = A.copy(), b.copy()
    x = back_substitute(A, b)
    np.testing.assert_array_equal(A, A0)
    np.testing.assert_array_equal(b, b0)
    assert x is not b
    assert x.dtype == np.float64


def test_entries_below_diagonal_are_ignored():
    A = np.array([[2.0, 0.0], [99.0, 4.0]])
    b = np.array([2.0, 8.0])
    np.testing.assert_array_equal(back_substitute(A, b), [1.0, 2.0])


def test_zero_diagonal_fails_at_its_row():
    A = np.array([[1.0, 2.0], [0.0, 0.0]])
    b = np.array([3.0, 0.0])
    with pytest.raises(BackSubstitutionFailure) as ei:
        back_substitute(A, b)
    assert ei.value.row == 1
    assert ei.value.stage == "back_substitution"
    assert str(ei.value) == "Back substitution failure in row 1"


def test_reports_highest_zero_row_first():
    A = np.array([[0.0, 1.0, 0.0], [0.0, 1.0, 1.0], [0.0, 0.0, 0.0]])
    b = np.array([1.0, 1.0, 0.0])
    with pytest.raises(BackSubstitutionFailure) as ei:
        back_substitute(A, b)
    assert ei.value.row == 2


def test_zero_in_upper_row_after_lower_rows_succeed():
    A = np.array([[0.0, 1.0], [0.0, 2.0]])
    b = np.array([1.0, 4.0])
    with pytest.raises(BackSubstitutionFailure) as ei:
        back_substitute(A, b)
    assert ei.value.row == 0


def test_accepts_integer_inputs_since_nothing_is_written():
    A = np.array([[2, 2], [0, 4]])
    b = np.array([6, 8])
    np.testing.assert_array_equal(back_substitute(A, b), [1.0, 2.0])


def test_empty_system():
    x = back_substitute(np.zeros((0, 0)), np.zeros(0))
    assert x.shape == (0,)
