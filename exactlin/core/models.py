"""Pydantic models for determinant traces, solution steps and solver results."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from exactlin.core.fraction import Fraction

Matrix = list[list[Fraction]]


class Method(str, Enum):
    """Solution strategy."""

    CRAMER = "cramer"
    ADJUGATE = "adjugate"
    GAUSS_JORDAN = "gauss_jordan"
    GAUSS_JORDAN_INVERSE = "gauss_jordan_inverse"


class FailureKind(str, Enum):
    """Why a solver run produced no solution."""

    NO_UNIQUE_SOLUTION = "no_unique_solution"
    NOT_INVERTIBLE = "not_invertible"
    SINGULAR = "singular"
    INCONSISTENT = "inconsistent"


# Determinant calculation tree


class BaseNode(BaseModel):
    """Trivial determinant of a 1x1 (or empty) matrix."""

    kind: Literal["base"] = "base"
    result: Fraction


class TwoByTwoNode(BaseModel):
    """``a*d - b*c`` with all four operands."""

    kind: Literal["two_by_two"] = "two_by_two"
    a: Fraction
    b: Fraction
    c: Fraction
    d: Fraction
    result: Fraction


class SarrusTerm(BaseModel):
    """One diagonal of Sarrus' rule."""

    values: list[Fraction] = Field(min_length=3, max_length=3)
    product: Fraction


class SarrusNode(BaseModel):
    """3x3 determinant as positive diagonals minus negative diagonals."""

    kind: Literal["sarrus"] = "sarrus"
    positive_terms: list[SarrusTerm] = Field(min_length=3, max_length=3)
    negative_terms: list[SarrusTerm] = Field(min_length=3, max_length=3)
    positive_sum: Fraction
    negative_sum: Fraction
    result: Fraction


class ExpansionTerm(BaseModel):
    """One nonzero first-row entry in a cofactor expansion."""

    sign: Literal["+", "-"]
    value: Fraction
    minor: Matrix
    minor_determinant: "DeterminantResult"


class ExpansionNode(BaseModel):
    """Cofactor expansion along the first row."""

    kind: Literal["expansion"] = "expansion"
    terms: list[ExpansionTerm] = Field(default_factory=list)
    result: Fraction


CalculationNode = Annotated[
    Union[BaseNode, TwoByTwoNode, SarrusNode, ExpansionNode],
    Field(discriminator="kind"),
]


class DeterminantResult(BaseModel):
    """Determinant value together with the tree describing its derivation."""

    value: Fraction
    calculation_tree: CalculationNode


ExpansionTerm.model_rebuild()
ExpansionNode.model_rebuild()
DeterminantResult.model_rebuild()


# Solution steps


class RowHighlight(BaseModel):
    """Rows to emphasize when a row operation is displayed."""

    pivot: int | None = None
    modified: int | None = None
    swap: tuple[int, int] | None = None


class MatrixStep(BaseModel):
    """Titled step showing a matrix and, optionally, how its determinant was found."""

    kind: Literal["matrix"] = "matrix"
    title: str
    matrix: Matrix
    calculation_tree: CalculationNode | None = None
    calculation: str | None = None


class CofactorDetail(BaseModel):
    """Derivation of one cofactor ``C_rc``."""

    position: str
    sign: Literal[1, -1]
    minor: Matrix
    minor_determinant: DeterminantResult
    cofactor_value: Fraction


class CofactorStep(BaseModel):
    """All cofactor derivations plus the assembled cofactor matrix."""

    kind: Literal["cofactors"] = "cofactors"
    title: str
    cofactor_details: list[CofactorDetail]
    matrix: Matrix


class CramerDivisionStep(BaseModel):
    """``variable = det(A_i) / det(A)``."""

    kind: Literal["cramer_division"] = "cramer_division"
    title: str
    variable_name: str
    det_numerator: Fraction
    det_denominator: Fraction
    final_value: Fraction
    calculation: str


class InverseMultiplicationStep(BaseModel):
    """Scaling of the adjugate by ``1/det(A)``."""

    kind: Literal["inverse_multiplication"] = "inverse_multiplication"
    title: str
    scalar: Fraction
    adjugate_matrix: Matrix
    final_matrix: Matrix


class RowOperationStep(BaseModel):
    """One elementary row operation of Gauss-Jordan elimination."""

    kind: Literal["row_operation"] = "row_operation"
    operation: str
    matrix_before: Matrix | None = None
    matrix: Matrix
    detailed_calculations: list[str] | None = None
    highlight: RowHighlight = Field(default_factory=RowHighlight)


SolutionStep = Annotated[
    Union[
        MatrixStep,
        CofactorStep,
        CramerDivisionStep,
        InverseMultiplicationStep,
        RowOperationStep,
    ],
    Field(discriminator="kind"),
]


# Solver results


class VariableValue(BaseModel):
    """Named variable with its display string and exact value."""

    name: str = Field(min_length=1)
    value: str
    fraction: Fraction


class SystemSolution(BaseModel):
    """Unique solution of ``A x = b``."""

    kind: Literal["solution"] = "solution"
    method: Method
    variables: list[VariableValue]
    determinant: Fraction | None = None
    steps: list[SolutionStep] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return True


class InverseSolution(BaseModel):
    """Inverse of a square matrix."""

    kind: Literal["inverse"] = "inverse"
    method: Method
    inverse: Matrix
    determinant: Fraction | None = None
    steps: list[SolutionStep] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate_square(self) -> "InverseSolution":
        size = len(self.inverse)
        if any(len(row) != size for row in self.inverse):
            raise ValueError("InverseSolution.inverse must be square")
        return self

    @property
    def ok(self) -> bool:
        return True


class SolverFailure(BaseModel):
    """No solution; carries the steps produced before the failure was detected."""

    kind: Literal["failure"] = "failure"
    method: Method
    failure: FailureKind
    error: str
    steps: list[SolutionStep] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False


SolverResult = Annotated[
    Union[SystemSolution, InverseSolution, SolverFailure],
    Field(discriminator="kind"),
]

_RESULT_ADAPTER: TypeAdapter[SolverResult] = TypeAdapter(SolverResult)


def parse_result(data: dict) -> SolverResult:
    """Validate a dict into a SolverResult variant."""

    return _RESULT_ADAPTER.validate_python(data)


def result_to_dict(result: SolverResult) -> dict:
    return result.model_dump(mode="json", exclude_none=True)


def load_result(path: str) -> SolverResult:
    """Load a solver result from a JSON file."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return parse_result(payload)


def dump_result(result: SolverResult, path: str) -> None:
    """Write a solver result to a JSON file."""

    Path(path).write_text(json.dumps(result_to_dict(result), indent=2), encoding="utf-8")
