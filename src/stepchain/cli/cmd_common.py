# topmark:header:start
#
#   project      : StepChain
#   file         : cmd_common.py
#   file_relpath : src/stepchain/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Small helpers shared by the Click commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stepchain.cli.console import ClickConsole

if TYPE_CHECKING:
    from stepchain.cli.console import ConsoleLike


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored by the group, creating a plain one if missing."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console
