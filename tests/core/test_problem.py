from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from exactlin.core.fraction import ZERO, Fraction
from exactlin.core.models import Method
from exactlin.core.problem import Problem, load_problem, parse_entry


def test_parse_entry_defaults_to_zero() -> None:
    assert parse_entry(None) == ZERO
    assert parse_entry("") == ZERO
    assert parse_entry("not a number") == ZERO
    assert parse_entry("1/0") == ZERO


def test_parse_entry_numbers_and_text() -> None:
    assert parse_entry(3) == Fraction(3, 1)
    assert parse_entry(0.75) == Fraction(3, 4)
    assert parse_entry("2/6") == Fraction(1, 3)
    assert parse_entry("-1.5") == Fraction(-3, 2)


def test_problem_requires_vector_for_solves() -> None:
    with pytest.raises(ValidationError):
        Problem.model_validate({"method": "cramer", "matrix": [[1, 2], [3, 4]]})
    with pytest.raises(ValidationError):
        Problem.model_validate(
            {"method": "gauss_jordan", "matrix": [[1, 2], [3, 4]], "vector": [1]}
        )
    problem = Problem.model_validate({"method": "adjugate", "matrix": [[1, 2], [3, 4]]})
    assert problem.method == Method.ADJUGATE


def test_problem_rejects_non_square() -> None:
    with pytest.raises(ValidationError):
        Problem.model_validate({"method": "adjugate", "matrix": [[1, 2, 3], [3, 4, 5]]})


def test_load_problem_uses_file_stem_as_id(tmp_path: Path) -> None:
    path = tmp_path / "sys_a.json"
    path.write_text(
        json.dumps({"method": "cramer", "matrix": [[2, 1], ["1", None]], "vector": [5, 3]}),
        encoding="utf-8",
    )

    problem = load_problem(str(path))

    assert problem.id == "sys_a"
    assert problem.fraction_matrix() == [
        [Fraction(2, 1), Fraction(1, 1)],
        [Fraction(1, 1), ZERO],
    ]
    assert problem.fraction_vector() == [Fraction(5, 1), Fraction(3, 1)]
