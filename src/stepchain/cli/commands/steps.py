# topmark:header:start
#
#   project      : StepChain
#   file         : steps.py
#   file_relpath : src/stepchain/cli/commands/steps.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""CLI command to list the declared steps of a composite.

Shows each step in execution order, together with the guard (if any) that
decides whether it runs. Supports a human-readable listing, JSON and Markdown.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from stepchain.cli.cli_types import EnumChoiceParam
from stepchain.cli.cmd_common import get_console, get_effective_verbosity
from stepchain.cli.targets import load_composite
from stepchain.cli.utils import OutputFormat, render_markdown_table
from stepchain.constants import STEPCHAIN_VERSION

if TYPE_CHECKING:
    from stepchain.core.composite import Composite


def build_steps_payload(composite: type[Composite]) -> dict[str, Any]:
    """Return a serializable description of ``composite``'s declared steps."""
    steps: list[dict[str, Any]] = []
    for index, descriptor in enumerate(composite.declared()):
        steps.append(
            {
                "index": index,
                "step": descriptor.step_name,
                "module": getattr(descriptor.step, "__module__", None),
                "guard": descriptor.guard_name,
            }
        )
    return {
        "composite": composite.__qualname__,
        "module": composite.__module__,
        "steps": steps,
    }


@click.command(
    name="steps",
    help="List the declared steps of a composite.",
    epilog="""
TARGET is 'package.module:ClassName'. Steps are listed in execution order;
guarded steps show the predicate that must be truthy for them to run.""",
)
@click.argument("target")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def steps_command(*, target: str, output_format: OutputFormat | None = None) -> None:
    """List the declared steps of ``target``.

    Args:
        target (str): Composite reference (``package.module:ClassName``).
        output_format (OutputFormat | None): Output format; human-readable if ``None``.
    """
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    composite = load_composite(target)
    payload = build_steps_payload(composite)

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(payload, indent=2))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print(f"# Steps of `{payload['composite']}`\n")
        if not payload["steps"]:
            console.print("_No steps declared._")
        else:
            rows: list[list[str]] = [
                [
                    str(s["index"] + 1),
                    f"`{s['step']}`",
                    f"`{s['guard']}`" if s["guard"] else "",
                ]
                for s in payload["steps"]
            ]
            console.print(render_markdown_table(["#", "Step", "Guard"], rows))
        console.print("\n---\n")
        console.print(f"_Generated with StepChain v{STEPCHAIN_VERSION}_\n")
        return

    total: int = len(payload["steps"])
    module: str = console.styled(f"({payload['module']})", dim=True)
    console.print(
        f"{console.styled(payload['composite'], bold=True)} {module} (total: {total})"
    )
    if not total:
        console.print("    - no steps declared")
        return

    width: int = len(str(total))
    for s in payload["steps"]:
        line = f"{s['index'] + 1:>{width}}. {s['step']}"
        if s["guard"]:
            line += " " + console.styled(f"[if {s['guard']}]", fg="cyan")
        if vlevel > 0 and s["module"]:
            line += " " + console.styled(f"({s['module']})", dim=True)
        console.print(f"    {line}")
