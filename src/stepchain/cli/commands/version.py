# topmark:header:start
#
#   project      : StepChain
#   file         : version.py
#   file_relpath : src/stepchain/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""StepChain `version` command.

Prints the StepChain version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from stepchain.cli.cli_types import EnumChoiceParam
from stepchain.cli.cmd_common import get_console, get_effective_verbosity
from stepchain.cli.utils import OutputFormat
from stepchain.constants import STEPCHAIN_VERSION


@click.command(
    name="version",
    help="Show the current version of StepChain.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of StepChain.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": STEPCHAIN_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# StepChain Version\n")
        console.print(f"**StepChain version: {STEPCHAIN_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("StepChain version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(STEPCHAIN_VERSION, bold=True)}")
    else:
        console.print(console.styled(STEPCHAIN_VERSION, bold=True))
