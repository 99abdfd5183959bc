"""Append-only JSONL run trace."""

from __future__ import annotations

import json
from pathlib import Path

from exactlin.core.models import SolverResult
from exactlin.trace.event import TraceEventKind, new_event, step_summary


class TraceLogger:
    """Writes one compact JSON line per solver run event."""

    def __init__(self, path: str) -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self.path.open("a", encoding="utf-8")

    def append(self, event: dict) -> None:
        line = json.dumps(event, ensure_ascii=False, separators=(",", ":"))
        self._fh.write(line + "\n")

    def record_result(self, problem_id: str, result: SolverResult) -> dict:
        """Append a SOLVE event summarizing ``result``; steps are counted, not copied."""

        data = {
            "problem_id": problem_id,
            "method": result.method.value,
            "kind": result.kind,
            **step_summary(result.steps),
        }
        if not result.ok:
            data["failure"] = result.failure.value
        event = new_event(TraceEventKind.SOLVE, f"solver finished: {result.kind}", data=data)
        self.append(event)
        return event

    def close(self) -> None:
        self._fh.close()

    def __enter__(self) -> "TraceLogger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def read_events(path: str) -> list[dict]:
    """Read every event from a JSONL trace file."""

    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return [json.loads(line) for line in lines if line.strip()]
