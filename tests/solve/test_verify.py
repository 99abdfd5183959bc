from __future__ import annotations

import pytest

sympy = pytest.importorskip("sympy")

from exactlin.core.fraction import Fraction
from exactlin.core.matrix import matrix_from_numbers, vector_from_numbers
from exactlin.solve.adjugate import invert_matrix
from exactlin.solve.cramer import solve_with_cramer
from exactlin.solve.determinant import determinant
from exactlin.solve.verify import check_inverse, check_solution, sympy_determinant, verify_result


@pytest.mark.parametrize(
    "rows",
    [
        [[3]],
        [[2, 1], [1, 1]],
        [[1, 2, 3], [4, 5, 6], [7, 8, 10]],
        [[2, 0, 1, 3], [1, -1, 0, 2], [0, 4, 1, -2], [3, 1, 2, 0.25]],
    ],
)
def test_determinant_matches_sympy(rows) -> None:
    m = matrix_from_numbers(rows)
    assert determinant(m).value == sympy_determinant(m)


def test_check_solution_pass_and_fail() -> None:
    a = matrix_from_numbers([[2, 1], [1, 1]])
    b = vector_from_numbers([5, 3])

    ok_pass, failed_pass = check_solution(a, b, [Fraction(2, 1), Fraction(1, 1)])
    ok_fail, failed_fail = check_solution(a, b, [Fraction(1, 1), Fraction(1, 1)])

    assert ok_pass is True
    assert failed_pass == []
    assert ok_fail is False
    assert failed_fail[0].startswith("row 1")


def test_check_inverse_detects_wrong_matrix() -> None:
    a = matrix_from_numbers([[2, 0], [0, 2]])
    ok, failed = check_inverse(a, matrix_from_numbers([[1, 0], [0, 1]]))
    assert ok is False
    assert len(failed) == 2


def test_verify_result_dispatches_on_result_kind() -> None:
    a = matrix_from_numbers([[1, 2, 3], [0, 1, 4], [5, 6, 0]])
    b = vector_from_numbers([1, 2, 3])

    assert verify_result(solve_with_cramer(a, b), a, b) == (True, [])
    assert verify_result(invert_matrix(a), a) == (True, [])
    singular = invert_matrix(matrix_from_numbers([[1, 2], [2, 4]]))
    assert verify_result(singular, a) == (True, [])
