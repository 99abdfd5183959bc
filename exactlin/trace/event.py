"""Trace events describing a solver run."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class TraceEventKind(str, Enum):
    """Event kinds written to a run trace."""

    START = "start"
    INPUT = "input"
    SOLVE = "solve"
    VERIFY = "verify"
    OUTPUT = "output"
    FINAL = "final"
    ERROR = "error"


def _utc_iso_z_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def new_event(
    kind: TraceEventKind | str,
    message: str,
    *,
    data: dict | None = None,
) -> dict:
    """Create a trace event dict with id and UTC timestamp."""

    return {
        "event_id": uuid4().hex,
        "ts": _utc_iso_z_now(),
        "kind": TraceEventKind(kind).value,
        "message": message,
        "data": data,
    }


def step_summary(steps: list) -> dict:
    """Count solution steps by kind, for compact trace payloads."""

    counts: dict[str, int] = {}
    for step in steps:
        counts[step.kind] = counts.get(step.kind, 0) + 1
    return {"step_count": len(steps), "by_kind": dict(sorted(counts.items()))}
