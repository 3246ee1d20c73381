# topmark:header:start
#
#   project      : StepChain
#   file         : contracts.py
#   file_relpath : src/stepchain/core/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Type contracts for steps and guards (engine-facing).

The engine only needs two things from the objects it is given:

1) a *step* exposes ``run_strict(context)``, which returns normally on success
   and raises on failure. `Command` subclasses (and therefore composites)
   satisfy this as a classmethod, but any object with that method will do;
2) a *guard* is either the name of a zero-argument predicate method on the
   composite instance, or a callable taking that instance.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

if TYPE_CHECKING:
    from .context import Context


class Step(Protocol):
    """Protocol for a single unit of work in a composite."""

    def run_strict(self, context: Context) -> Any:
        """Execute against ``context``, raising on failure.

        Args:
            context (Context): The shared, mutable context.

        Returns:
            Any: Ignored by the engine.
        """
        ...


class Rollbackable(Protocol):
    """Anything the context can undo after a later failure."""

    def rollback(self) -> None:
        """Undo the effects of a previously successful run."""
        ...


Guard: TypeAlias = "str | Callable[[Any], object]"
"""A predicate method name, or a callable receiving the composite instance."""
