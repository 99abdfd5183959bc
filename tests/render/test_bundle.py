from __future__ import annotations

import json
from pathlib import Path

from exactlin.core.matrix import matrix_from_numbers, vector_from_numbers
from exactlin.core.models import parse_result, result_to_dict
from exactlin.render.bundle import write_explain_bundle
from exactlin.solve.gauss_jordan import solve_with_gauss_jordan


def _sample_result():
    return solve_with_gauss_jordan(
        matrix_from_numbers([[2, 1], [1, 1]]), vector_from_numbers([5, 3])
    )


def test_write_explain_bundle_writes_expected_files(tmp_path: Path) -> None:
    result = _sample_result()
    out_dir = tmp_path / "bundles" / "case"

    write_explain_bundle(result, out_dir)

    payload = json.loads((out_dir / "result.json").read_text(encoding="utf-8"))
    assert payload == result_to_dict(result)
    assert parse_result(payload) == result
    assert "# Gauss-Jordan Elimination" in (out_dir / "result.md").read_text(encoding="utf-8")


def test_steps_txt_lists_one_line_per_step(tmp_path: Path) -> None:
    result = _sample_result()

    write_explain_bundle(result, tmp_path)

    lines = (tmp_path / "steps.txt").read_text(encoding="utf-8").splitlines()
    assert len(lines) == len(result.steps)
    assert lines[0] == "1\trow_operation\tInitial augmented matrix [A|b]"
    assert lines[-1].split("\t")[1] == "matrix"


def test_write_explain_bundle_is_stable_across_rewrites(tmp_path: Path) -> None:
    result = _sample_result()

    write_explain_bundle(result, tmp_path)
    first = {name: (tmp_path / name).read_text(encoding="utf-8") for name in ("result.json", "result.md", "steps.txt")}
    write_explain_bundle(result, tmp_path)

    for name, text in first.items():
        assert (tmp_path / name).read_text(encoding="utf-8") == text
