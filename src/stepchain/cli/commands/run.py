# topmark:header:start
#
#   project      : StepChain
#   file         : run.py
#   file_relpath : src/stepchain/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""StepChain `run` command.

Invokes a composite with a context seeded from a TOML file and/or repeated
``--set KEY=VALUE`` options, then reports the final context.

Exit status:
- ``0`` when the composite succeeds;
- ``1`` when it fails via ``context.fail(...)`` (the context is still printed);
- ``70`` when a step or guard raises any other exception.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from stepchain.cli.cli_types import EnumChoiceParam
from stepchain.cli.cmd_common import get_console, get_effective_verbosity
from stepchain.cli.errors import (
    StepchainConfigError,
    StepchainFileNotFoundError,
    StepchainPipelineError,
    StepchainUsageError,
)
from stepchain.cli.exit_codes import ExitCode
from stepchain.cli.targets import load_composite
from stepchain.cli.utils import OutputFormat
from stepchain.config.loaders import SeedError, load_context_seed, parse_assignment
from stepchain.config.logging import get_logger
from stepchain.core.context import Context
from stepchain.core.errors import ReservedNameError

logger = get_logger(__name__)


def build_seed(context_file: Path | None, assignments: tuple[str, ...]) -> dict[str, Any]:
    """Merge the TOML seed file and the ``--set`` assignments (later wins).

    Args:
        context_file (Path | None): Optional TOML file with the initial values.
        assignments (tuple[str, ...]): ``KEY=VALUE`` strings, applied in order.

    Returns:
        dict[str, Any]: The initial context values.

    Raises:
        StepchainFileNotFoundError: If ``context_file`` does not exist or cannot be read.
        StepchainConfigError: If ``context_file`` is not a valid seed document.
        StepchainUsageError: If an assignment is malformed.
    """
    seed: dict[str, Any] = {}
    if context_file is not None:
        try:
            seed.update(load_context_seed(context_file))
        except FileNotFoundError as exc:
            raise StepchainFileNotFoundError(f"Context file not found: {context_file}") from exc
        except SeedError as exc:
            raise StepchainConfigError(str(exc)) from exc
        except OSError as exc:
            raise StepchainFileNotFoundError(
                f"Cannot read context file {context_file}: {exc}"
            ) from exc

    for assignment in assignments:
        try:
            key, value = parse_assignment(assignment)
        except SeedError as exc:
            raise StepchainUsageError(str(exc)) from exc
        seed[key] = value
    return seed


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    return json.dumps(value, default=repr)


@click.command(
    name="run",
    help="Run a composite and print the resulting context.",
    epilog="""
TARGET is 'package.module:ClassName'. Seed values are read from the [context]
table of --context FILE (or from the whole document if it has none), then
overridden by each --set KEY=VALUE. VALUE is parsed as a TOML value when
possible (3, true, [1, 2], "text"), otherwise kept as a plain string.""",
)
@click.argument("target")
@click.option(
    "--context",
    "context_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with the initial context values.",
)
@click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set an initial context value. May be repeated.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format (default, json).",
)
def run_command(
    *,
    target: str,
    context_file: Path | None,
    assignments: tuple[str, ...],
    output_format: OutputFormat | None = None,
) -> None:
    """Run ``target`` and print its final context.

    Args:
        target (str): Composite reference (``package.module:ClassName``).
        context_file (Path | None): Optional TOML seed file.
        assignments (tuple[str, ...]): ``KEY=VALUE`` seed overrides.
        output_format (OutputFormat | None): Output format; human-readable if ``None``.
    """
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.MARKDOWN:
        raise StepchainUsageError("The 'run' command supports --format default or json.")

    composite = load_composite(target)
    seed = build_seed(context_file, assignments)
    try:
        initial = Context(seed)
    except ReservedNameError as exc:
        raise StepchainUsageError(str(exc)) from exc
    logger.debug("Running %s with seed keys %s", target, sorted(seed))

    try:
        result: Context = composite.run(initial)
    except Exception as exc:
        # Anything other than the composite's own Failure is unexpected here.
        raise StepchainPipelineError(f"{target} raised {type(exc).__name__}: {exc}") from exc

    if fmt == OutputFormat.JSON:
        payload = {"target": target, "success": result.success, "context": result.to_dict()}
        console.print(json.dumps(payload, indent=2, default=repr))
    else:
        if result.success:
            console.print(console.styled(f"✅ {target} succeeded", fg="green"))
        else:
            console.print(console.styled(f"❌ {target} failed", fg="red"))
        if vlevel >= 0:
            for key, value in result.to_dict().items():
                console.print(f"    {key} = {_render_value(value)}")

    if result.failure:
        ctx.exit(ExitCode.FAILURE)
