"""Deterministic Markdown rendering of solver results."""

from __future__ import annotations

from typing import Sequence

from exactlin.core.fraction import Fraction, to_display_string
from exactlin.core.matrix import DEFAULT_CELL_WIDTH, format_matrix
from exactlin.core.models import (
    BaseNode,
    CalculationNode,
    CofactorStep,
    CramerDivisionStep,
    ExpansionNode,
    InverseMultiplicationStep,
    InverseSolution,
    MatrixStep,
    RowHighlight,
    RowOperationStep,
    SarrusNode,
    SolutionStep,
    SolverFailure,
    SolverResult,
    SystemSolution,
    TwoByTwoNode,
)

_METHOD_TITLES = {
    "cramer": "Cramer's Rule",
    "adjugate": "Inverse by Adjugate",
    "gauss_jordan": "Gauss-Jordan Elimination",
    "gauss_jordan_inverse": "Inverse by Gauss-Jordan Elimination",
}


def _s(value: Fraction) -> str:
    return to_display_string(value)


def _matrix_block(
    matrix: Sequence[Sequence[Fraction]],
    *,
    highlight: RowHighlight | None = None,
    cell_width: int = DEFAULT_CELL_WIDTH,
) -> list[str]:
    rows = format_matrix(matrix, cell_width).split("\n") if matrix else ["| |"]
    if highlight is not None:
        marked: list[str] = []
        for index, row in enumerate(rows):
            if highlight.pivot == index:
                row += "  <- pivot"
            elif highlight.modified == index:
                row += "  <- modified"
            elif highlight.swap is not None and index in highlight.swap:
                row += "  <- swapped"
            marked.append(row)
        rows = marked
    return ["```text", *rows, "```"]


def render_calculation(
    tree: CalculationNode, *, cell_width: int = DEFAULT_CELL_WIDTH
) -> list[str]:
    """Narrate how a determinant was computed, one Markdown line per item."""

    if isinstance(tree, TwoByTwoNode):
        left = tree.a * tree.d
        right = tree.b * tree.c
        return [
            f"({_s(tree.a)} * {_s(tree.d)}) - ({_s(tree.b)} * {_s(tree.c)}) = "
            f"{_s(left)} - {_s(right)} = **{_s(tree.result)}**"
        ]

    if isinstance(tree, SarrusNode):
        lines = [
            "Sarrus' rule (sum of the main diagonals minus sum of the secondary diagonals):",
            "",
            "Positive diagonals (+):",
        ]
        for term in tree.positive_terms:
            lines.append(f"- ({' * '.join(_s(v) for v in term.values)}) = {_s(term.product)}")
        lines.append(f"- **Sum = {_s(tree.positive_sum)}**")
        lines.append("")
        lines.append("Negative diagonals (-):")
        for term in tree.negative_terms:
            lines.append(f"- ({' * '.join(_s(v) for v in term.values)}) = {_s(term.product)}")
        lines.append(f"- **Sum = {_s(tree.negative_sum)}**")
        lines.append("")
        lines.append(
            f"Result: ({_s(tree.positive_sum)}) - ({_s(tree.negative_sum)}) = "
            f"**{_s(tree.result)}**"
        )
        return lines

    if isinstance(tree, ExpansionNode):
        lines = ["Cofactor expansion along the first row:", ""]
        for term in tree.terms:
            lines.append(f"{term.sign} {_s(term.value)} * det of")
            lines.extend(_matrix_block(term.minor, cell_width=cell_width))
        for term in tree.terms:
            if len(term.minor) > 1:
                lines.append("")
                lines.append(f"For the term **{_s(term.value)}**, the minor determinant is:")
                nested = render_calculation(
                    term.minor_determinant.calculation_tree, cell_width=cell_width
                )
                lines.extend(f"> {line}" if line else ">" for line in nested)
        lines.append("")
        lines.append(f"**Final determinant: {_s(tree.result)}**")
        return lines

    if isinstance(tree, BaseNode):
        return [f"Determinant = **{_s(tree.result)}**"]

    return [tree.__class__.__name__]


def render_step(step: SolutionStep, *, cell_width: int = DEFAULT_CELL_WIDTH) -> list[str]:
    """Render a single step as a Markdown section."""

    if isinstance(step, RowOperationStep):
        lines = [f"### {step.operation}"]
        if step.matrix_before is not None:
            lines.append("Matrix before the operation:")
            lines.extend(
                _matrix_block(step.matrix_before, highlight=step.highlight, cell_width=cell_width)
            )
        lines.append("Matrix after the operation:")
        lines.extend(_matrix_block(step.matrix, highlight=step.highlight, cell_width=cell_width))
        if step.detailed_calculations:
            lines.append("Detailed calculations:")
            lines.extend(f"- {calc}" for calc in step.detailed_calculations)
        return lines

    lines = [f"### {step.title}"]

    if isinstance(step, CofactorStep):
        lines.append(
            "Each cofactor is Cij = (-1)^(i+j) * det(Mij), where Mij is the minor matrix."
        )
        for detail in step.cofactor_details:
            row_label, col_label = detail.position[1], detail.position[2:]
            lines.append("")
            lines.append(f"#### {detail.position}")
            lines.append(f"{detail.position} = (-1)^({row_label}+{col_label}) * det(minor)")
            lines.extend(_matrix_block(detail.minor, cell_width=cell_width))
            lines.extend(
                render_calculation(detail.minor_determinant.calculation_tree, cell_width=cell_width)
            )
            lines.append(
                f"{detail.position} = ({detail.sign}) * ({_s(detail.minor_determinant.value)}) = "
                f"**{_s(detail.cofactor_value)}**"
            )
        lines.append("")
        lines.append("Resulting cofactor matrix:")
        lines.extend(_matrix_block(step.matrix, cell_width=cell_width))
        return lines

    if isinstance(step, CramerDivisionStep):
        lines.append(step.calculation)
        lines.append(
            f"{step.variable_name} = {_s(step.det_numerator)} / {_s(step.det_denominator)} = "
            f"**{_s(step.final_value)}**"
        )
        return lines

    if isinstance(step, InverseMultiplicationStep):
        lines.append("Multiply the adjugate matrix by the scalar 1/det(A):")
        lines.append(f"Scalar: {_s(step.scalar)}")
        lines.append("Adjugate:")
        lines.extend(_matrix_block(step.adjugate_matrix, cell_width=cell_width))
        lines.append("Result:")
        lines.extend(_matrix_block(step.final_matrix, cell_width=cell_width))
        return lines

    if isinstance(step, MatrixStep):
        lines.extend(_matrix_block(step.matrix, cell_width=cell_width))
        if step.calculation_tree is not None:
            lines.extend(render_calculation(step.calculation_tree, cell_width=cell_width))
        if step.calculation:
            lines.append(step.calculation)
        return lines

    return lines


def render_result_markdown(
    result: SolverResult,
    *,
    title: str | None = None,
    cell_width: int = DEFAULT_CELL_WIDTH,
) -> str:
    """Render a solver result (steps plus outcome) as a Markdown report."""

    method = result.method.value
    lines = [f"# {title or _METHOD_TITLES.get(method, method)}"]
    lines.append("")
    lines.append(f"- method: {method}")
    lines.append(f"- steps: {len(result.steps)}")

    for step in result.steps:
        lines.append("")
        lines.extend(render_step(step, cell_width=cell_width))

    lines.append("")
    if isinstance(result, SystemSolution):
        lines.append("## Final Solution")
        lines.append(", ".join(f"{item.name} = {item.value}" for item in result.variables))
    elif isinstance(result, InverseSolution):
        lines.append("## Final Result: Inverse Matrix A⁻¹")
        lines.extend(_matrix_block(result.inverse, cell_width=cell_width))
    elif isinstance(result, SolverFailure):
        lines.append("## Error")
        lines.append(f"- {result.failure.value}: {result.error}")

    return "\n".join(lines) + "\n"
