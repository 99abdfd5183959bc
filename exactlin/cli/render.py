"""Render a solver result JSON file into a Markdown explanation."""

from __future__ import annotations

import argparse
from pathlib import Path

from exactlin.config import load_settings
from exactlin.core.models import load_result
from exactlin.render.markdown import render_result_markdown


def _default_out_path(input_path: str) -> Path:
    return Path(input_path + ".md")


def main(argv: list[str] | None = None) -> int:
    """Run the Markdown render CLI."""

    parser = argparse.ArgumentParser(description="Render a solver result JSON into Markdown.")
    parser.add_argument("path", help="Path to result JSON file.")
    parser.add_argument(
        "--out",
        help="Output Markdown path (default: <input>.md).",
    )
    parser.add_argument("--title", help="Report title (default: the method name).")
    args = parser.parse_args(argv)

    try:
        out_path = Path(args.out) if args.out else _default_out_path(args.path)
        settings = load_settings()

        result = load_result(args.path)
        markdown = render_result_markdown(
            result, title=args.title, cell_width=settings.cell_width
        )

        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(markdown, encoding="utf-8")

        print(f"OK: {result.method.value} -> {out_path}")
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"ERROR: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
