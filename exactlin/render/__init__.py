"""Render utilities for solver results."""

from exactlin.render.bundle import write_explain_bundle
from exactlin.render.markdown import render_calculation, render_result_markdown

__all__ = ["render_calculation", "render_result_markdown", "write_explain_bundle"]
