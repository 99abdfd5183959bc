"""Run-trace helpers for the exactlin CLI."""

from exactlin.trace.event import TraceEventKind, new_event, step_summary
from exactlin.trace.logger import TraceLogger, read_events

__all__ = ["TraceEventKind", "TraceLogger", "new_event", "read_events", "step_summary"]
