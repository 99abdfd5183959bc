from __future__ import annotations

from pathlib import Path

import pytest

from exactlin.cli.render import main
from exactlin.core.matrix import matrix_from_numbers
from exactlin.core.models import dump_result
from exactlin.solve.adjugate import invert_matrix


def test_render_cli_defaults_to_input_path_with_md_suffix(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    result_path = tmp_path / "inverse.json"
    dump_result(invert_matrix(matrix_from_numbers([[2, 0], [0, 2]])), str(result_path))

    code = main([str(result_path)])

    out_path = tmp_path / "inverse.json.md"
    assert code == 0
    assert capsys.readouterr().out.strip() == f"OK: adjugate -> {out_path}"
    assert out_path.read_text(encoding="utf-8").startswith("# Inverse by Adjugate\n")


def test_render_cli_custom_title_and_out(tmp_path: Path) -> None:
    result_path = tmp_path / "inverse.json"
    dump_result(invert_matrix(matrix_from_numbers([[1, 2], [2, 4]])), str(result_path))
    out_path = tmp_path / "reports" / "singular.md"

    code = main([str(result_path), "--out", str(out_path), "--title", "Singular"])

    assert code == 0
    text = out_path.read_text(encoding="utf-8")
    assert text.startswith("# Singular\n")
    assert "- not_invertible: The determinant is 0. The matrix is not invertible." in text


def test_render_cli_reports_invalid_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text('{"kind": "solution"}', encoding="utf-8")

    assert main([str(bad)]) == 1
    assert capsys.readouterr().out.startswith("ERROR:")
