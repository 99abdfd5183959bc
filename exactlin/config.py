"""Runtime settings read from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from exactlin.core.fraction import DEFAULT_MAX_DECIMAL_DIGITS
from exactlin.core.matrix import DEFAULT_CELL_WIDTH


class Settings(BaseModel):
    """Knobs for input conversion and text rendering."""

    max_decimal_digits: int = Field(default=DEFAULT_MAX_DECIMAL_DIGITS, ge=1, le=18)
    cell_width: int = Field(default=DEFAULT_CELL_WIDTH, ge=1, le=40)


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from ``EXACTLIN_*`` variables, falling back to defaults."""

    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    if env.get("EXACTLIN_MAX_DECIMAL_DIGITS"):
        values["max_decimal_digits"] = env["EXACTLIN_MAX_DECIMAL_DIGITS"]
    if env.get("EXACTLIN_CELL_WIDTH"):
        values["cell_width"] = env["EXACTLIN_CELL_WIDTH"]
    return Settings.model_validate(values)
