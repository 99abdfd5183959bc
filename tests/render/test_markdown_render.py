from __future__ import annotations

from exactlin.core.matrix import matrix_from_numbers, vector_from_numbers
from exactlin.render.markdown import render_calculation, render_result_markdown
from exactlin.solve.adjugate import invert_matrix
from exactlin.solve.cramer import solve_with_cramer
from exactlin.solve.determinant import determinant
from exactlin.solve.gauss_jordan import solve_with_gauss_jordan


def test_render_two_by_two_calculation() -> None:
    tree = determinant(matrix_from_numbers([[2, 1], [1, 1]])).calculation_tree
    assert render_calculation(tree) == ["(2 * 1) - (1 * 1) = 2 - 1 = **1**"]


def test_render_sarrus_lists_every_diagonal() -> None:
    tree = determinant(matrix_from_numbers([[1, 2, 3], [4, 5, 6], [7, 8, 10]])).calculation_tree
    lines = render_calculation(tree)
    assert "- (1 * 5 * 10) = 50" in lines
    assert "- (3 * 5 * 7) = 105" in lines
    assert lines[-1] == "Result: (230) - (233) = **-3**"


def test_render_expansion_nests_minor_calculations() -> None:
    m = matrix_from_numbers([[2, 0, 1, 3], [1, -1, 0, 2], [0, 4, 1, -2], [3, 1, 2, 0]])
    lines = render_calculation(determinant(m).calculation_tree)
    assert lines[0] == "Cofactor expansion along the first row:"
    assert "For the term **2**, the minor determinant is:" in lines
    assert any(line.startswith("> Sarrus' rule") for line in lines)
    assert lines[-1] == "**Final determinant: -8**"


def test_render_cramer_report() -> None:
    result = solve_with_cramer(
        matrix_from_numbers([[2, 1], [1, 1]]), vector_from_numbers([5, 3])
    )
    report = render_result_markdown(result)
    assert report.startswith("# Cramer's Rule\n")
    assert "### Step 1: Compute the system determinant (Δ)" in report
    assert "x = 2 / 1 = **2**" in report
    assert "## Final Solution\nx = 2, y = 1" in report


def test_render_inverse_report_includes_cofactors() -> None:
    report = render_result_markdown(invert_matrix(matrix_from_numbers([[2, 0], [0, 2]])))
    assert "#### C12" in report
    assert "C12 = (-1)^(1+2) * det(minor)" in report
    assert "## Final Result: Inverse Matrix A⁻¹" in report
    assert "1/2" in report


def test_render_row_operations_and_failure() -> None:
    result = solve_with_gauss_jordan(
        matrix_from_numbers([[1, 1], [2, 2]]), vector_from_numbers([1, 3])
    )
    report = render_result_markdown(result, title="GJ")
    assert report.startswith("# GJ\n")
    assert "Matrix before the operation:" in report
    assert "<- modified" in report
    assert "## Error\n- inconsistent:" in report


def test_render_is_deterministic() -> None:
    result = invert_matrix(matrix_from_numbers([[1, 2, 3], [0, 1, 4], [5, 6, 0]]))
    assert render_result_markdown(result) == render_result_markdown(result)
