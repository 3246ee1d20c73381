# topmark:header:start
#
#   project      : StepChain
#   file         : main.py
#   file_relpath : src/stepchain/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Click entry point for the StepChain CLI.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` so every subcommand reads the same console and verbosity level.
Internal logging is configured from the ``STEPCHAIN_LOG_LEVEL`` environment
variable, independently of ``-v``/``-q``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from stepchain.cli.commands.run import run_command
from stepchain.cli.commands.steps import steps_command
from stepchain.cli.commands.version import version_command
from stepchain.cli.console import ClickConsole
from stepchain.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from stepchain.cli.utils import ColorMode, resolve_color_mode
from stepchain.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from stepchain.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: %s", {k: v for k, v in ctx.obj.items() if k != "console"})


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="StepChain CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the StepChain CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'stepchain steps MODULE:CLASS' to inspect a composite.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(steps_command)

cli.add_command(run_command)

if __name__ == "__main__":
    cli()
