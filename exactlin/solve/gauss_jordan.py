"""Gauss-Jordan elimination over exact fractions, with a row-operation trace."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from exactlin.core.fraction import ONE, Fraction, to_display_string
from exactlin.core.matrix import augment, copy_matrix, identity, right_block
from exactlin.core.models import (
    FailureKind,
    InverseSolution,
    MatrixStep,
    Method,
    RowHighlight,
    RowOperationStep,
    SolutionStep,
    SolverFailure,
    SolverResult,
    SystemSolution,
    VariableValue,
)
from exactlin.solve.cramer import variable_name

logger = logging.getLogger(__name__)


@dataclass
class EliminationOutcome:
    """Final working matrix plus the steps and, on failure, why it stopped."""

    matrix: list[list[Fraction]]
    steps: list[SolutionStep] = field(default_factory=list)
    failure: FailureKind | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def _fmt(value: Fraction) -> str:
    return to_display_string(value)


def _swap_rows(work: list[list[Fraction]], pivot_row: int, found: int) -> RowOperationStep:
    work[pivot_row], work[found] = work[found], work[pivot_row]
    return RowOperationStep(
        operation=f"Swap R{pivot_row + 1} ↔ R{found + 1}",
        matrix=copy_matrix(work),
        highlight=RowHighlight(swap=(pivot_row, found)),
    )


def _normalize_pivot_row(work: list[list[Fraction]], pivot_row: int, col: int) -> RowOperationStep:
    before = copy_matrix(work)
    pivot = work[pivot_row][col]
    details: list[str] = []
    for c in range(col, len(work[pivot_row])):
        old = work[pivot_row][c]
        new = old / pivot
        work[pivot_row][c] = new
        details.append(
            f"Row {pivot_row + 1}, Col {c + 1}: {_fmt(old)} / {_fmt(pivot)} = {_fmt(new)}"
        )
    return RowOperationStep(
        operation=f"R{pivot_row + 1} → R{pivot_row + 1} / {_fmt(pivot)}",
        matrix_before=before,
        matrix=copy_matrix(work),
        detailed_calculations=details,
        highlight=RowHighlight(pivot=pivot_row),
    )


def _clear_row(
    work: list[list[Fraction]], row: int, pivot_row: int, col: int
) -> RowOperationStep:
    before = copy_matrix(work)
    factor = work[row][col]
    details: list[str] = []
    for c in range(col, len(work[row])):
        old = work[row][c]
        pivot_value = work[pivot_row][c]
        new = old - factor * pivot_value
        work[row][c] = new
        details.append(
            f"Row {row + 1}, Col {c + 1}: {_fmt(old)} - ({_fmt(factor)} * {_fmt(pivot_value)})"
            f" = {_fmt(new)}"
        )
    return RowOperationStep(
        operation=f"R{row + 1} → R{row + 1} - ({_fmt(factor)}) * R{pivot_row + 1}",
        matrix_before=before,
        matrix=copy_matrix(work),
        detailed_calculations=details,
        highlight=RowHighlight(pivot=pivot_row, modified=row),
    )


def eliminate(
    augmented: Sequence[Sequence[Fraction]],
    *,
    initial_description: str = "Initial augmented matrix [A|b]",
    system: bool = True,
) -> EliminationOutcome:
    """Reduce ``[A|B]`` to reduced row-echelon form.

    Pivots are searched in the coefficient columns only (the first ``rows``
    columns). The input is copied; callers' matrices are never modified.
    With ``system=False`` the right block is an identity to be turned into
    the inverse, so no row can be inconsistent.
    """

    work = copy_matrix(augmented)
    rows = len(work)
    width = len(work[0]) if work else 0
    steps: list[SolutionStep] = [
        RowOperationStep(operation=initial_description, matrix=copy_matrix(work))
    ]

    pivot_row = 0
    for col in range(min(rows, width)):
        if pivot_row >= rows:
            break

        found = next((r for r in range(pivot_row, rows) if not work[r][col].is_zero), None)
        if found is None:
            logger.debug("gauss-jordan: no pivot in column %d", col + 1)
            continue

        if found != pivot_row:
            steps.append(_swap_rows(work, pivot_row, found))

        if work[pivot_row][col] != ONE:
            steps.append(_normalize_pivot_row(work, pivot_row, col))

        for row in range(rows):
            if row == pivot_row or work[row][col].is_zero:
                continue
            steps.append(_clear_row(work, row, pivot_row, col))

        pivot_row += 1

    if system and width == rows + 1:
        for row in range(pivot_row, rows):
            coefficients_zero = all(value.is_zero for value in work[row][:-1])
            if coefficients_zero and not work[row][-1].is_zero:
                return EliminationOutcome(
                    matrix=work,
                    steps=steps,
                    failure=FailureKind.INCONSISTENT,
                    error=(
                        f"Inconsistent system: row {row + 1} reduces to "
                        f"0 = {_fmt(work[row][-1])}, so there is no solution."
                    ),
                )

    if pivot_row < rows:
        if system:
            consequence = "the system has infinitely many solutions (no unique solution)."
        else:
            consequence = "is not invertible (A cannot be reduced to I)."
        return EliminationOutcome(
            matrix=work,
            steps=steps,
            failure=FailureKind.SINGULAR,
            error=f"Only {pivot_row} pivot(s) for {rows} rows: the matrix is singular and {consequence}",
        )

    steps.append(
        MatrixStep(
            title="Reduced row-echelon form (RREF)",
            matrix=copy_matrix(work),
            calculation="Every pivot is 1 and every other entry in a pivot column is 0.",
        )
    )
    return EliminationOutcome(matrix=work, steps=steps)


def _check_square(matrix: Sequence[Sequence[Fraction]]) -> int:
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    return size


def solve_with_gauss_jordan(
    matrix: Sequence[Sequence[Fraction]], vector: Sequence[Fraction]
) -> SolverResult:
    """Solve ``A x = b`` by reducing ``[A|b]``."""

    size = _check_square(matrix)
    if len(vector) != size:
        raise ValueError("right-hand side length must match the matrix size")

    outcome = eliminate(augment(matrix, vector))
    if not outcome.ok:
        return SolverFailure(
            method=Method.GAUSS_JORDAN,
            failure=outcome.failure,
            error=outcome.error or "",
            steps=outcome.steps,
        )

    variables = []
    for index in range(size):
        value = outcome.matrix[index][-1]
        variables.append(
            VariableValue(name=variable_name(index), value=to_display_string(value), fraction=value)
        )
    return SystemSolution(method=Method.GAUSS_JORDAN, variables=variables, steps=outcome.steps)


def invert_matrix_with_gauss_jordan(matrix: Sequence[Sequence[Fraction]]) -> SolverResult:
    """Invert ``A`` by reducing ``[A|I]``; the right block becomes ``A⁻¹``."""

    size = _check_square(matrix)
    outcome = eliminate(
        augment(matrix, identity(size)),
        initial_description="Initial augmented matrix [A|I]: reduce A to I and I becomes A⁻¹",
        system=False,
    )
    if not outcome.ok:
        return SolverFailure(
            method=Method.GAUSS_JORDAN_INVERSE,
            failure=outcome.failure,
            error=outcome.error or "The matrix is singular and is not invertible.",
            steps=outcome.steps,
        )
    return InverseSolution(
        method=Method.GAUSS_JORDAN_INVERSE,
        inverse=right_block(outcome.matrix, size),
        steps=outcome.steps,
    )
