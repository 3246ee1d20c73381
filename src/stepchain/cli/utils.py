# topmark:header:start
#
#   project      : StepChain
#   file         : utils.py
#   file_relpath : src/stepchain/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Output-format and color helpers shared by StepChain CLI commands.

These helpers are Click-free so they can be unit tested in isolation.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
      MARKDOWN: A Markdown document (for docs and reviews).
    """

    DEFAULT = "default"
    JSON = "json"
    MARKDOWN = "markdown"


class ColorMode(Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
      1. **Machine formats**: ``"json"`` never uses color.
      2. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
      3. **Environment**: ``FORCE_COLOR`` (set, not ``"0"``) → True;
         ``NO_COLOR`` (set) → False.
      4. **Auto**: ``stdout.isatty()``.

    Args:
      cli_mode: Parsed `ColorMode` from ``--color``; ``None`` means "not provided".
      output_format: Structured output mode, if known.
      stdout_isatty: Optional override for TTY detection.

    Returns:
      True if ANSI color should be enabled; False otherwise.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False

    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False

    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def render_markdown_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a GitHub-flavoured Markdown table with padded, left-aligned columns.

    Args:
      headers: Column headers.
      rows: Row sequences, each the same length as ``headers``.

    Returns:
      The Markdown table as a single string (ending with a newline).

    Raises:
      ValueError: If a row does not have as many cells as there are headers.
    """
    if not headers:
        return ""
    ncols = len(headers)
    for r in rows:
        if len(r) != ncols:
            raise ValueError("All rows must have the same number of columns as headers")

    widths = [len(str(h)) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(str(cell)))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{str(c):<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    sep_line = "| " + " | ".join("-" * max(1, w) for w in widths) + " |"
    return "\n".join([_line(headers), sep_line, *(_line(r) for r in rows)]) + "\n"
