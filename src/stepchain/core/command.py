# topmark:header:start
#
#   project      : StepChain
#   file         : command.py
#   file_relpath : src/stepchain/core/command.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Base class for commands: single units of business logic.

A command receives a `Context`, mutates it in `call()`, and signals failure by
calling ``self.context.fail(...)`` (or by raising any other exception).

Lifecycle
---------
``Command.run_strict(ctx)`` builds an instance bound to ``ctx`` and:

1) invokes ``call()``;
2) on success, records the instance on the context so it can be rolled back
   if a later command in the same chain fails;
3) on any exception, asks the context to roll back every recorded command
   (newest first, once per context) and re-raises.

``Command.run(ctx)`` does the same but swallows the `Failure` raised for this
very context, returning the context so callers can inspect ``ctx.success``.

Example:
    ```python
    class Authenticate(Command):
        def call(self) -> None:
            user = USERS.get(self.context.email)
            if user is None:
                self.context.fail(error="unknown user")
            self.context.user = user


    ctx = Authenticate.run(email="ada@example.org")
    if ctx.failure:
        print(ctx.error)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from stepchain.config.logging import get_logger
from stepchain.core.context import Context
from stepchain.core.errors import Failure

if TYPE_CHECKING:
    from collections.abc import Mapping

    from stepchain.config.logging import StepchainLogger

logger: StepchainLogger = get_logger(__name__)


class Command:
    """Reusable foundation for commands.

    Subclass this and override `call()` (and optionally `rollback()`). Do not
    override `run` or `run_strict` unless you need a custom lifecycle.

    Attributes:
        context (Context): The context this instance operates on.
    """

    context: Context

    def __init__(self, context: Context | Mapping[str, Any] | None = None, **data: Any) -> None:
        self.context = Context.build(context, **data)

    @classmethod
    def run(cls, context: Context | Mapping[str, Any] | None = None, **data: Any) -> Context:
        """Invoke the command, absorbing its own failure.

        Args:
            context (Context | Mapping[str, Any] | None): Context or seed values.
            **data (Any): Extra values merged into the context.

        Returns:
            Context: The context, with ``success``/``failure`` set.

        Raises:
            Failure: If the failure belongs to a different context.
        """
        instance = cls(context, **data)
        try:
            instance.execute()
        except Failure as exc:
            if exc.context is not instance.context:
                raise
            logger.debug("%s failed: %s", cls.__name__, exc)
        return instance.context

    @classmethod
    def run_strict(cls, context: Context | Mapping[str, Any] | None = None, **data: Any) -> Context:
        """Invoke the command and let any failure propagate.

        This is the entry point composites use for their steps.

        Args:
            context (Context | Mapping[str, Any] | None): Context or seed values.
            **data (Any): Extra values merged into the context.

        Returns:
            Context: The context after a successful run.
        """
        instance = cls(context, **data)
        instance.execute()
        return instance.context

    def execute(self) -> None:
        """Run `call()` with rollback bookkeeping."""
        logger.trace("Command %s - running", type(self).__name__)
        try:
            self.call()
        except Exception:
            self.context.rollback()
            raise
        self.context.called(self)

    def call(self) -> None:
        """Perform the command's work, mutating ``self.context`` in place."""

    def rollback(self) -> None:
        """Undo the effects of `call()` after a later failure (optional)."""
