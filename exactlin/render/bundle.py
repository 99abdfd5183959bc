"""Explain bundle writer for solver results."""

from __future__ import annotations

import json
from pathlib import Path

from exactlin.core.matrix import DEFAULT_CELL_WIDTH
from exactlin.core.models import SolverResult, result_to_dict
from exactlin.render.markdown import render_result_markdown


def _step_label(step) -> str:
    label = step.operation if step.kind == "row_operation" else step.title
    return label.replace("\r\n", "\\n").replace("\n", "\\n").replace("\t", " ")


def write_explain_bundle(
    result: SolverResult, out_dir: Path, *, cell_width: int = DEFAULT_CELL_WIDTH
) -> None:
    """Write ``result.json``, ``result.md`` and ``steps.txt`` into ``out_dir``."""

    out_dir.mkdir(parents=True, exist_ok=True)

    (out_dir / "result.json").write_text(
        json.dumps(result_to_dict(result), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    (out_dir / "result.md").write_text(
        render_result_markdown(result, cell_width=cell_width), encoding="utf-8"
    )

    step_lines = [
        f"{index}\t{step.kind}\t{_step_label(step)}"
        for index, step in enumerate(result.steps, start=1)
    ]
    steps_text = ("\n".join(step_lines) + "\n") if step_lines else ""
    (out_dir / "steps.txt").write_text(steps_text, encoding="utf-8")
