"""Core exactlin types: fractions, matrices and result models."""

from exactlin.core.fraction import ONE, ZERO, Fraction, from_float, to_display_string
from exactlin.core.matrix import Matrix, Vector, format_matrix, get_minor
from exactlin.core.models import FailureKind, Method, SolverResult
from exactlin.core.problem import Problem, load_problem

__all__ = [
    "FailureKind",
    "Fraction",
    "Matrix",
    "Method",
    "ONE",
    "Problem",
    "SolverResult",
    "Vector",
    "ZERO",
    "format_matrix",
    "from_float",
    "get_minor",
    "load_problem",
    "to_display_string",
]
