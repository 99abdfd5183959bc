"""Cross-check exact results against SymPy rational arithmetic."""

from __future__ import annotations

from typing import Sequence

import sympy

from exactlin.core.fraction import Fraction, to_display_string
from exactlin.core.models import InverseSolution, SolverResult, SystemSolution


def to_sympy_rational(value: Fraction) -> sympy.Rational:
    return sympy.Rational(value.numerator, value.denominator)


def from_sympy_rational(value: object) -> Fraction:
    rational = sympy.Rational(value)
    return Fraction(int(rational.p), int(rational.q))


def to_sympy_matrix(matrix: Sequence[Sequence[Fraction]]) -> sympy.Matrix:
    return sympy.Matrix([[to_sympy_rational(value) for value in row] for row in matrix])


def sympy_determinant(matrix: Sequence[Sequence[Fraction]]) -> Fraction:
    """Determinant computed independently by SymPy."""

    if not matrix:
        return Fraction(1, 1)
    return from_sympy_rational(to_sympy_matrix(matrix).det())


def check_solution(
    matrix: Sequence[Sequence[Fraction]],
    vector: Sequence[Fraction],
    values: Sequence[Fraction],
) -> tuple[bool, list[str]]:
    """Substitute ``values`` into each equation; collect the rows that fail."""

    failed: list[str] = []
    if len(values) != len(matrix):
        return False, [f"expected {len(matrix)} values, got {len(values)}"]

    x = sympy.Matrix([to_sympy_rational(value) for value in values])
    lhs = to_sympy_matrix(matrix) * x
    for row, expected in enumerate(vector):
        got = lhs[row]
        if sympy.simplify(got - to_sympy_rational(expected)) != 0:
            failed.append(
                f"row {row + 1}: lhs = {got}, expected {to_display_string(expected)}"
            )
    return len(failed) == 0, failed


def check_inverse(
    matrix: Sequence[Sequence[Fraction]],
    inverse: Sequence[Sequence[Fraction]],
) -> tuple[bool, list[str]]:
    """Check ``A * A^-1 == I`` entry by entry."""

    size = len(matrix)
    if len(inverse) != size or any(len(row) != size for row in inverse):
        return False, ["inverse shape does not match matrix"]

    product = to_sympy_matrix(matrix) * to_sympy_matrix(inverse)
    failed: list[str] = []
    for row in range(size):
        for col in range(size):
            expected = 1 if row == col else 0
            if product[row, col] != expected:
                failed.append(f"(A*A^-1)[{row + 1},{col + 1}] = {product[row, col]}, expected {expected}")
    return len(failed) == 0, failed


def verify_result(
    result: SolverResult,
    matrix: Sequence[Sequence[Fraction]],
    vector: Sequence[Fraction] | None = None,
) -> tuple[bool, list[str]]:
    """Verify a successful solver result; failures have nothing to check."""

    if isinstance(result, SystemSolution):
        if vector is None:
            return False, ["vector required to verify a system solution"]
        return check_solution(matrix, vector, [item.fraction for item in result.variables])
    if isinstance(result, InverseSolution):
        return check_inverse(matrix, result.inverse)
    return True, []
