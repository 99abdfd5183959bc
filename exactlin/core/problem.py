"""Problem input files: raw numeric entries -> validated Fraction matrices."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

from exactlin.core.fraction import (
    DEFAULT_MAX_DECIMAL_DIGITS,
    ZERO,
    Fraction,
    from_float,
    parse_fraction,
)
from exactlin.core.models import Method

RawEntry = int | float | str | None

_NEEDS_VECTOR = {Method.CRAMER, Method.GAUSS_JORDAN}


def parse_entry(value: Any, max_digits: int = DEFAULT_MAX_DECIMAL_DIGITS) -> Fraction:
    """Convert one raw entry; missing or unparseable values become 0."""

    if value is None:
        return ZERO
    if isinstance(value, Fraction):
        return value
    if isinstance(value, (int, float)):
        try:
            return from_float(value, max_digits)
        except ValueError:
            return ZERO
    if isinstance(value, str):
        try:
            return parse_fraction(value, max_digits)
        except (ValueError, ZeroDivisionError):
            return ZERO
    return ZERO


class Problem(BaseModel):
    """A square system ``A x = b`` (or a bare matrix to invert)."""

    id: str = Field(default="problem", min_length=1)
    method: Method
    matrix: list[list[RawEntry]] = Field(min_length=1)
    vector: list[RawEntry] | None = None

    @model_validator(mode="after")
    def _validate_shape(self) -> "Problem":
        size = len(self.matrix)
        if any(len(row) != size for row in self.matrix):
            raise ValueError("Problem.matrix must be square")
        if self.method in _NEEDS_VECTOR:
            if self.vector is None:
                raise ValueError(f"method {self.method.value} requires a vector")
            if len(self.vector) != size:
                raise ValueError("Problem.vector length must match the matrix size")
        return self

    def fraction_matrix(self, max_digits: int = DEFAULT_MAX_DECIMAL_DIGITS) -> list[list[Fraction]]:
        return [[parse_entry(value, max_digits) for value in row] for row in self.matrix]

    def fraction_vector(self, max_digits: int = DEFAULT_MAX_DECIMAL_DIGITS) -> list[Fraction]:
        return [parse_entry(value, max_digits) for value in self.vector or []]


def load_problem(path: str) -> Problem:
    """Load a problem from a JSON file; the id defaults to the file stem."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(payload, dict) and "id" not in payload:
        payload["id"] = Path(path).stem or "problem"
    return Problem.model_validate(payload)
