"""CLI entrypoint: solve a problem JSON file and write the explained result.

Exit codes: 0 on a solution, 2 when the solver reports a failure (singular
or inconsistent system; outputs are still written), 1 on bad input.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from exactlin.config import Settings, load_settings
from exactlin.core.models import Method, SolverResult, result_to_dict
from exactlin.core.problem import Problem, load_problem
from exactlin.render.bundle import write_explain_bundle
from exactlin.render.markdown import render_result_markdown
from exactlin.solve.runner import solve_problem
from exactlin.trace import TraceEventKind, TraceLogger, new_event

logger = logging.getLogger(__name__)


class _SafeTraceLogger:
    """Best-effort trace logger that never raises to CLI flow."""

    def __init__(self, path: Path) -> None:
        self._logger: TraceLogger | None = None
        self._enabled = True
        try:
            self._logger = TraceLogger(str(path))
        except OSError as exc:
            self._enabled = False
            print(f"WARNING: run trace logging disabled: {exc}")

    def append(self, event: dict) -> None:
        if not self._enabled or self._logger is None:
            return
        try:
            self._logger.append(event)
        except (OSError, TypeError, ValueError) as exc:
            self._enabled = False
            print(f"WARNING: run trace logging failed: {exc}")

    def record_result(self, problem_id: str, result: SolverResult) -> None:
        if not self._enabled or self._logger is None:
            return
        try:
            self._logger.record_result(problem_id, result)
        except (OSError, TypeError, ValueError) as exc:
            self._enabled = False
            print(f"WARNING: run trace logging failed: {exc}")

    def close(self) -> None:
        if self._logger is None:
            return
        try:
            self._logger.close()
        except OSError as exc:
            print(f"WARNING: run trace close failed: {exc}")


def _resolve_md_out_path(*, render_md: bool, json_out: str | None, md_out: str | None) -> Path | None:
    if not render_md:
        return None
    if md_out:
        return Path(md_out)
    if not json_out:
        raise ValueError("--render-md requires --out or --md-out.")
    return Path(json_out).with_suffix(".md")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a linear system or invert a matrix exactly, with explained steps."
    )
    parser.add_argument("path", help="Path to problem JSON file.")
    parser.add_argument(
        "--method",
        choices=[method.value for method in Method],
        help="Override the method stored in the problem file.",
    )
    parser.add_argument("--out", help="Output path for the result JSON.")
    parser.add_argument(
        "--render-md",
        action="store_true",
        help="Also render a Markdown explanation (default path: --out with .md).",
    )
    parser.add_argument("--md-out", help="Markdown output path.")
    parser.add_argument(
        "--bundle-dir",
        help="Optional directory for an explain bundle (<bundle-dir>/<problem id>/).",
    )
    parser.add_argument(
        "--print",
        dest="print_json",
        action="store_true",
        help="Print the result JSON to stdout.",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check a successful result with SymPy.",
    )
    parser.add_argument("--trace-out", help="Append run trace events to this JSONL file.")
    parser.add_argument(
        "--max-decimal-digits",
        type=int,
        help="Decimal places kept when converting inputs (env EXACTLIN_MAX_DECIMAL_DIGITS).",
    )
    parser.add_argument(
        "--cell-width",
        type=int,
        help="Matrix cell width in rendered text (env EXACTLIN_CELL_WIDTH).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Python logging level (default: WARNING).",
    )
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings()
    overrides = {}
    if args.max_decimal_digits is not None:
        overrides["max_decimal_digits"] = args.max_decimal_digits
    if args.cell_width is not None:
        overrides["cell_width"] = args.cell_width
    if overrides:
        settings = Settings.model_validate({**settings.model_dump(), **overrides})
    return settings


def main(argv: list[str] | None = None) -> int:
    """Run the solve CLI."""

    args = _build_parser().parse_args(argv)
    _configure_logging(args.log_level)
    trace: _SafeTraceLogger | None = None

    try:
        settings = _resolve_settings(args)
        if args.trace_out:
            trace = _SafeTraceLogger(Path(args.trace_out))
            trace.append(
                new_event(TraceEventKind.START, "start: read problem", data={"path": args.path})
            )

        problem = load_problem(args.path)
        if args.method:
            problem = Problem.model_validate({**problem.model_dump(), "method": args.method})
        if trace is not None:
            trace.append(
                new_event(
                    TraceEventKind.INPUT,
                    "problem loaded",
                    data={
                        "problem_id": problem.id,
                        "method": problem.method.value,
                        "size": len(problem.matrix),
                    },
                )
            )

        result = solve_problem(problem, settings)
        logger.info("%s: %s via %s", problem.id, result.kind, problem.method.value)
        if trace is not None:
            trace.record_result(problem.id, result)

        if args.verify and result.ok:
            from exactlin.solve.verify import verify_result

            matrix = problem.fraction_matrix(settings.max_decimal_digits)
            vector = problem.fraction_vector(settings.max_decimal_digits) if problem.vector else None
            verified, failures = verify_result(result, matrix, vector)
            if trace is not None:
                trace.append(
                    new_event(
                        TraceEventKind.VERIFY,
                        "sympy cross-check",
                        data={"ok": verified, "failures": failures},
                    )
                )
            if not verified:
                raise ValueError("Verification failed: " + "; ".join(failures))
            print(f"VERIFIED: {problem.id}")

        payload = result_to_dict(result)
        md_path = _resolve_md_out_path(
            render_md=args.render_md, json_out=args.out, md_out=args.md_out
        )
        if args.out:
            out_path = Path(args.out)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        if md_path is not None:
            md_path.parent.mkdir(parents=True, exist_ok=True)
            md_path.write_text(
                render_result_markdown(result, cell_width=settings.cell_width), encoding="utf-8"
            )
        if args.bundle_dir:
            write_explain_bundle(
                result, Path(args.bundle_dir) / problem.id, cell_width=settings.cell_width
            )
        if args.print_json:
            print(json.dumps(payload, ensure_ascii=False))
        if trace is not None:
            trace.append(
                new_event(
                    TraceEventKind.OUTPUT,
                    "outputs written",
                    data={"out": args.out, "md_out": str(md_path) if md_path else None},
                )
            )

        if trace is not None:
            trace.append(
                new_event(TraceEventKind.FINAL, "done", data={"ok": result.ok, "kind": result.kind})
            )

        if not result.ok:
            print(f"FAILED: {problem.id}: {result.error}")
            return 2
        print(f"OK: {problem.id}")
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        if trace is not None:
            trace.append(new_event(TraceEventKind.ERROR, str(exc)))
        print(f"ERROR: {exc}")
        return 1
    finally:
        if trace is not None:
            trace.close()


if __name__ == "__main__":
    raise SystemExit(main())
