"""Dispatch a loaded Problem to the solver for its method."""

from __future__ import annotations

from exactlin.config import Settings
from exactlin.core.models import Method, SolverResult
from exactlin.core.problem import Problem
from exactlin.solve.adjugate import invert_matrix
from exactlin.solve.cramer import solve_with_cramer
from exactlin.solve.gauss_jordan import invert_matrix_with_gauss_jordan, solve_with_gauss_jordan


def solve_problem(problem: Problem, settings: Settings | None = None) -> SolverResult:
    """Run ``problem.method`` on the problem's entries."""

    settings = settings or Settings()
    matrix = problem.fraction_matrix(settings.max_decimal_digits)

    if problem.method == Method.CRAMER:
        return solve_with_cramer(matrix, problem.fraction_vector(settings.max_decimal_digits))
    if problem.method == Method.GAUSS_JORDAN:
        return solve_with_gauss_jordan(matrix, problem.fraction_vector(settings.max_decimal_digits))
    if problem.method == Method.ADJUGATE:
        return invert_matrix(matrix)
    if problem.method == Method.GAUSS_JORDAN_INVERSE:
        return invert_matrix_with_gauss_jordan(matrix)
    raise ValueError(f"Unsupported method: {problem.method}")
