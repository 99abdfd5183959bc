"""Matrix inverse through the cofactor matrix and its transpose (adjugate)."""

from __future__ import annotations

import logging
from typing import Sequence

from exactlin.core.fraction import MINUS_ONE, ONE, Fraction
from exactlin.core.matrix import copy_matrix, get_minor, scale_matrix, transpose
from exactlin.core.models import (
    CofactorDetail,
    CofactorStep,
    FailureKind,
    InverseMultiplicationStep,
    InverseSolution,
    MatrixStep,
    Method,
    SolutionStep,
    SolverFailure,
    SolverResult,
)
from exactlin.solve.determinant import determinant, sign_for

logger = logging.getLogger(__name__)


def cofactor_matrix(
    matrix: Sequence[Sequence[Fraction]],
) -> tuple[list[list[Fraction]], list[CofactorDetail]]:
    """Return the cofactor matrix and the derivation of each entry, row-major."""

    details: list[CofactorDetail] = []
    cofactors: list[list[Fraction]] = []
    for row in range(len(matrix)):
        cofactor_row: list[Fraction] = []
        for col in range(len(matrix)):
            sign = sign_for(row, col)
            minor = get_minor(matrix, row, col)
            minor_result = determinant(minor)
            value = minor_result.value if sign > 0 else MINUS_ONE * minor_result.value
            details.append(
                CofactorDetail(
                    position=f"C{row + 1}{col + 1}",
                    sign=sign,
                    minor=minor,
                    minor_determinant=minor_result,
                    cofactor_value=value,
                )
            )
            cofactor_row.append(value)
        cofactors.append(cofactor_row)
    return cofactors, details


def invert_matrix(matrix: Sequence[Sequence[Fraction]]) -> SolverResult:
    """Invert ``A`` as ``adj(A) / det(A)``, narrating each stage."""

    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square and non-empty")

    steps: list[SolutionStep] = []
    det_a = determinant(matrix)
    steps.append(
        MatrixStep(
            title="Step 1: Compute the determinant of the matrix (det(A))",
            matrix=copy_matrix(matrix),
            calculation_tree=det_a.calculation_tree,
        )
    )

    if det_a.value.is_zero:
        logger.debug("adjugate: determinant is zero, matrix is not invertible")
        return SolverFailure(
            method=Method.ADJUGATE,
            failure=FailureKind.NOT_INVERTIBLE,
            error="The determinant is 0. The matrix is not invertible.",
            steps=steps,
        )

    cofactors, details = cofactor_matrix(matrix)
    steps.append(
        CofactorStep(
            title="Step 2: Compute the cofactor matrix C(A)",
            cofactor_details=details,
            matrix=cofactors,
        )
    )

    adjugate = transpose(cofactors)
    steps.append(
        MatrixStep(
            title="Step 3: Compute the adjugate matrix adj(A) = C(A)ᵀ",
            matrix=adjugate,
            calculation="The adjugate matrix is the transpose of the cofactor matrix.",
        )
    )

    scalar = ONE / det_a.value
    inverse = scale_matrix(adjugate, scalar)
    steps.append(
        InverseMultiplicationStep(
            title="Step 4: Compute the inverse A⁻¹ = (1/det(A)) * adj(A)",
            scalar=scalar,
            adjugate_matrix=adjugate,
            final_matrix=inverse,
        )
    )

    return InverseSolution(
        method=Method.ADJUGATE,
        inverse=inverse,
        determinant=det_a.value,
        steps=steps,
    )
