# topmark:header:start
#
#   project      : StepChain
#   file         : engine.py
#   file_relpath : src/stepchain/core/engine.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Execution engine: walk a composite's descriptors in declared order.

For every descriptor the engine:

1) evaluates the guard, if any, against the composite *instance*, right before
   the step (so it sees what earlier steps wrote to the context);
2) skips the step when the guard is falsy;
3) otherwise calls ``step.run_strict(context)`` with the shared context.

Errors are not caught here. Whatever a step or a guard raises (including an
`AttributeError` for a guard naming a missing method) leaves `execute`
immediately and no later descriptor is evaluated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stepchain.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stepchain.config.logging import StepchainLogger
    from stepchain.core.context import Context
    from stepchain.core.contracts import Guard
    from stepchain.core.registry import StepDescriptor

logger: StepchainLogger = get_logger(__name__)


def evaluate_guard(owner: object, guard: Guard) -> bool:
    """Evaluate ``guard`` against ``owner``.

    Args:
        owner (object): The composite instance.
        guard (Guard): Predicate method name, or callable receiving ``owner``.

    Returns:
        bool: The truthiness of the predicate's result.
    """
    if isinstance(guard, str):
        return bool(getattr(owner, guard)())
    return bool(guard(owner))


def execute(owner: object, descriptors: Sequence[StepDescriptor], context: Context) -> None:
    """Run ``descriptors`` in order against ``context``.

    Args:
        owner (object): The composite instance guards are resolved on.
        descriptors (Sequence[StepDescriptor]): Declared steps, in execution order.
        context (Context): The context handed to every step.
    """
    owner_name = type(owner).__qualname__
    for index, descriptor in enumerate(descriptors):
        if descriptor.guard is not None and not evaluate_guard(owner, descriptor.guard):
            logger.trace(
                "Engine %s: step %d %s skipped (guard %s)",
                owner_name,
                index,
                descriptor.step_name,
                descriptor.guard_name,
            )
            continue

        logger.trace("Engine %s: step %d %s - running", owner_name, index, descriptor.step_name)
        descriptor.step.run_strict(context)

    logger.debug("Engine %s: completed %d declared step(s)", owner_name, len(descriptors))
