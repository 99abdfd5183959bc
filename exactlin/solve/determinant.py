"""Recursive determinant that records its own derivation.

Sizes 1-3 use closed forms (trivial, ``ad - bc``, Sarrus' rule). Larger
matrices are expanded along the first row, which is O(N!) and meant for the
small matrices shown in worked examples.
"""

from __future__ import annotations

from typing import Literal, Sequence

from exactlin.core.fraction import MINUS_ONE, ONE, ZERO, Fraction
from exactlin.core.matrix import get_minor, transpose
from exactlin.core.models import (
    BaseNode,
    DeterminantResult,
    ExpansionNode,
    ExpansionTerm,
    SarrusNode,
    SarrusTerm,
    TwoByTwoNode,
)


def sign_for(row: int, col: int) -> int:
    """Checkerboard cofactor sign ``(-1)^(row+col)``."""

    return 1 if (row + col) % 2 == 0 else -1


def _sign_fraction(sign: int) -> Fraction:
    return ONE if sign > 0 else MINUS_ONE


def _sarrus_term(values: list[Fraction]) -> SarrusTerm:
    product = values[0] * values[1] * values[2]
    return SarrusTerm(values=values, product=product)


def _determinant_3x3(matrix: Sequence[Sequence[Fraction]]) -> DeterminantResult:
    (a, b, c), (d, e, f), (g, h, i) = matrix

    positive_terms = [
        _sarrus_term([a, e, i]),
        _sarrus_term([b, f, g]),
        _sarrus_term([c, d, h]),
    ]
    negative_terms = [
        _sarrus_term([c, e, g]),
        _sarrus_term([a, f, h]),
        _sarrus_term([b, d, i]),
    ]
    positive_sum = positive_terms[0].product + positive_terms[1].product + positive_terms[2].product
    negative_sum = negative_terms[0].product + negative_terms[1].product + negative_terms[2].product
    result = positive_sum - negative_sum

    return DeterminantResult(
        value=result,
        calculation_tree=SarrusNode(
            positive_terms=positive_terms,
            negative_terms=negative_terms,
            positive_sum=positive_sum,
            negative_sum=negative_sum,
            result=result,
        ),
    )


def determinant(matrix: Sequence[Sequence[Fraction]]) -> DeterminantResult:
    """Compute ``det(matrix)`` together with its calculation tree.

    The empty matrix (the minor of a 1x1 matrix) has determinant 1.
    """

    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("determinant requires a square matrix")

    if size == 0:
        return DeterminantResult(value=ONE, calculation_tree=BaseNode(result=ONE))

    if size == 1:
        value = matrix[0][0]
        return DeterminantResult(value=value, calculation_tree=BaseNode(result=value))

    if size == 2:
        (a, b), (c, d) = matrix
        result = a * d - b * c
        return DeterminantResult(
            value=result,
            calculation_tree=TwoByTwoNode(a=a, b=b, c=c, d=d, result=result),
        )

    if size == 3:
        return _determinant_3x3(matrix)

    total = ZERO
    terms: list[ExpansionTerm] = []
    for col, value in enumerate(matrix[0]):
        if value.is_zero:
            continue
        sign = sign_for(0, col)
        minor = get_minor(matrix, 0, col)
        minor_result = determinant(minor)
        total = total + _sign_fraction(sign) * (value * minor_result.value)
        terms.append(
            ExpansionTerm(
                sign="+" if sign > 0 else "-",
                value=value,
                minor=minor,
                minor_determinant=minor_result,
            )
        )

    return DeterminantResult(value=total, calculation_tree=ExpansionNode(terms=terms, result=total))


def expand_along(
    matrix: Sequence[Sequence[Fraction]],
    index: int,
    axis: Literal["row", "column"] = "row",
) -> Fraction:
    """Laplace expansion along any row or column (value only)."""

    size = len(matrix)
    if not 0 <= index < max(size, 1):
        raise IndexError(f"{axis} index {index} out of range for size {size}")
    if size <= 1:
        return determinant(matrix).value
    if axis == "column":
        return expand_along(transpose(matrix), index, "row")
    if axis != "row":
        raise ValueError(f"unknown axis: {axis}")

    total = ZERO
    for col, value in enumerate(matrix[index]):
        if value.is_zero:
            continue
        minor_value = determinant(get_minor(matrix, index, col)).value
        total = total + _sign_fraction(sign_for(index, col)) * (value * minor_value)
    return total
