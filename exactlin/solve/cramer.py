"""Cramer's-rule solver for square linear systems."""

from __future__ import annotations

import logging
from typing import Sequence

from exactlin.core.fraction import Fraction, to_display_string
from exactlin.core.matrix import copy_matrix, replace_column
from exactlin.core.models import (
    CramerDivisionStep,
    FailureKind,
    MatrixStep,
    Method,
    SolutionStep,
    SolverFailure,
    SolverResult,
    SystemSolution,
    VariableValue,
)
from exactlin.solve.determinant import determinant

logger = logging.getLogger(__name__)

VARIABLE_NAMES = ("x", "y", "z", "w", "v")


def variable_name(index: int) -> str:
    """Name for the unknown in column ``index``: x, y, z, w, v, then x6, x7, ..."""

    if index < len(VARIABLE_NAMES):
        return VARIABLE_NAMES[index]
    return f"x{index + 1}"


def _check_system(matrix: Sequence[Sequence[Fraction]], vector: Sequence[Fraction]) -> None:
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("coefficient matrix must be square and non-empty")
    if len(vector) != size:
        raise ValueError("right-hand side length must match the matrix size")


def solve_with_cramer(
    matrix: Sequence[Sequence[Fraction]], vector: Sequence[Fraction]
) -> SolverResult:
    """Solve ``A x = b`` with Cramer's rule, narrating every determinant."""

    _check_system(matrix, vector)
    steps: list[SolutionStep] = []

    det_a = determinant(matrix)
    steps.append(
        MatrixStep(
            title="Step 1: Compute the system determinant (Δ)",
            matrix=copy_matrix(matrix),
            calculation_tree=det_a.calculation_tree,
        )
    )

    if det_a.value.is_zero:
        logger.debug("cramer: determinant is zero, stopping")
        return SolverFailure(
            method=Method.CRAMER,
            failure=FailureKind.NO_UNIQUE_SOLUTION,
            error="The determinant is 0. The system has no unique solution.",
            steps=steps,
        )

    variables: list[VariableValue] = []
    for index in range(len(vector)):
        name = variable_name(index)
        matrix_i = replace_column(matrix, index, vector)
        det_i = determinant(matrix_i)
        value = det_i.value / det_a.value

        steps.append(
            MatrixStep(
                title=f"Step {index + 2}: Compute the determinant for {name} (Δ{name})",
                matrix=matrix_i,
                calculation_tree=det_i.calculation_tree,
            )
        )
        steps.append(
            CramerDivisionStep(
                title=f"Step {index + 2}.1: Find the value of {name}",
                variable_name=name,
                det_numerator=det_i.value,
                det_denominator=det_a.value,
                final_value=value,
                calculation=f"{name} = Δ{name} / Δ",
            )
        )
        variables.append(VariableValue(name=name, value=to_display_string(value), fraction=value))

    logger.debug("cramer: solved %d unknowns, det=%s", len(variables), det_a.value)
    return SystemSolution(
        method=Method.CRAMER,
        variables=variables,
        determinant=det_a.value,
        steps=steps,
    )
