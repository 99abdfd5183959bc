"""Determinant engine and linear-system solvers."""

from exactlin.solve.adjugate import invert_matrix
from exactlin.solve.cramer import solve_with_cramer
from exactlin.solve.determinant import determinant
from exactlin.solve.gauss_jordan import (
    eliminate,
    invert_matrix_with_gauss_jordan,
    solve_with_gauss_jordan,
)
from exactlin.solve.runner import solve_problem

__all__ = [
    "determinant",
    "eliminate",
    "invert_matrix",
    "invert_matrix_with_gauss_jordan",
    "solve_problem",
    "solve_with_cramer",
    "solve_with_gauss_jordan",
]
