"""Square-matrix helpers over Fractions.

Matrices are plain ``list[list[Fraction]]`` values. Every helper returns a new
matrix; inputs are never mutated.
"""

from __future__ import annotations

from typing import Sequence

from exactlin.core.fraction import ONE, ZERO, Fraction, from_float, to_display_string

Matrix = list[list[Fraction]]
Vector = list[Fraction]

DEFAULT_CELL_WIDTH = 8


def copy_matrix(matrix: Sequence[Sequence[Fraction]]) -> Matrix:
    return [list(row) for row in matrix]


def get_minor(matrix: Sequence[Sequence[Fraction]], row: int, col: int) -> Matrix:
    """Drop one row and one column, keeping the order of the rest."""

    return [
        [value for col_index, value in enumerate(values) if col_index != col]
        for row_index, values in enumerate(matrix)
        if row_index != row
    ]


def transpose(matrix: Sequence[Sequence[Fraction]]) -> Matrix:
    if not matrix:
        return []
    return [[row[col] for row in matrix] for col in range(len(matrix[0]))]


def identity(size: int) -> Matrix:
    return [[ONE if r == c else ZERO for c in range(size)] for r in range(size)]


def scale_matrix(matrix: Sequence[Sequence[Fraction]], scalar: Fraction) -> Matrix:
    return [[value * scalar for value in row] for row in matrix]


def replace_column(
    matrix: Sequence[Sequence[Fraction]], col: int, column: Sequence[Fraction]
) -> Matrix:
    """Copy ``matrix`` with column ``col`` swapped for ``column``."""

    out = copy_matrix(matrix)
    for row_index, value in enumerate(column):
        out[row_index][col] = value
    return out


def augment(
    left: Sequence[Sequence[Fraction]],
    right: Sequence[Fraction] | Sequence[Sequence[Fraction]],
) -> Matrix:
    """Build ``[left|right]`` where ``right`` is a vector or a matrix."""

    if len(left) != len(right):
        raise ValueError("Augmented blocks must have the same number of rows")
    out: Matrix = []
    for row, extra in zip(left, right):
        if isinstance(extra, Fraction):
            out.append(list(row) + [extra])
        else:
            out.append(list(row) + list(extra))
    return out


def right_block(matrix: Sequence[Sequence[Fraction]], width: int) -> Matrix:
    """Return the rightmost ``width`` columns."""

    return [list(row[len(row) - width :]) for row in matrix]


def multiply_matrices(
    lhs: Sequence[Sequence[Fraction]], rhs: Sequence[Sequence[Fraction]]
) -> Matrix:
    if not lhs:
        return []
    inner = len(rhs)
    if any(len(row) != inner for row in lhs):
        raise ValueError("Matrix shapes are not compatible for multiplication")
    cols = len(rhs[0]) if rhs else 0
    out: Matrix = []
    for row in lhs:
        out_row: Vector = []
        for col in range(cols):
            total = ZERO
            for k in range(inner):
                total = total + row[k] * rhs[k][col]
            out_row.append(total)
        out.append(out_row)
    return out


def matrix_from_numbers(rows: Sequence[Sequence[int | float]]) -> Matrix:
    return [[from_float(value) for value in row] for row in rows]


def vector_from_numbers(values: Sequence[int | float]) -> Vector:
    return [from_float(value) for value in values]


def format_matrix(
    matrix: Sequence[Sequence[Fraction]], cell_width: int = DEFAULT_CELL_WIDTH
) -> str:
    """Render one ``| a b c |`` line per row with right-aligned cells."""

    return "\n".join(
        "| " + " ".join(to_display_string(value).rjust(cell_width) for value in row) + " |"
        for row in matrix
    )
