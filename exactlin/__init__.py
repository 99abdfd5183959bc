"""Exact rational linear-system solvers with step-by-step explanations."""

from exactlin.core.fraction import ONE, ZERO, Fraction
from exactlin.solve import (
    determinant,
    invert_matrix,
    invert_matrix_with_gauss_jordan,
    solve_with_cramer,
    solve_with_gauss_jordan,
)

__all__ = [
    "ONE",
    "ZERO",
    "Fraction",
    "determinant",
    "invert_matrix",
    "invert_matrix_with_gauss_jordan",
    "solve_with_cramer",
    "solve_with_gauss_jordan",
]

__version__ = "0.1.0"
