# topmark:header:start
#
#   project      : StepChain
#   file         : errors.py
#   file_relpath : src/stepchain/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Exceptions for the StepChain CLI.

Raise these in CLI commands to exit with a standardized message and exit code.
They prefer the project console if one is present in the Click context (see
`StepchainCliError.show`), and fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from stepchain.cli.exit_codes import ExitCode


class StepchainCliError(click.ClickException):
    """Base class for all StepChain CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class StepchainUsageError(StepchainCliError):
    """Error for command-line invocation errors (invalid flags/args/targets)."""

    exit_code = ExitCode.USAGE_ERROR


class StepchainFileNotFoundError(StepchainCliError):
    """Error when a context seed file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class StepchainConfigError(StepchainCliError):
    """Error for malformed context seeds."""

    exit_code = ExitCode.CONFIG_ERROR


class StepchainPipelineError(StepchainCliError):
    """Error for unexpected exceptions raised by a step or guard."""

    exit_code = ExitCode.PIPELINE_ERROR
