# topmark:header:start
#
#   project      : StepChain
#   file         : errors.py
#   file_relpath : src/stepchain/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Exceptions raised by StepChain commands and composites.

Errors raised by user steps are never wrapped: the engine lets them propagate
unchanged. The classes below cover the library's own conditions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stepchain.core.context import Context


class StepchainError(Exception):
    """Base class for all StepChain errors."""


class Failure(StepchainError):
    """Raised by `Context.fail()` to abort the current command chain.

    Attributes:
        context (Context): The context that was marked as failed.
    """

    def __init__(self, context: Context) -> None:
        super().__init__(context.get("error") or "command failed")
        self.context = context


class DeclarationError(StepchainError, TypeError):
    """An item given to `Composite.declare()` cannot be turned into a step descriptor."""


class RegistrySealedError(StepchainError, RuntimeError):
    """Steps were declared on a composite type that has already executed."""


class ReservedNameError(StepchainError, AttributeError):
    """A context key would shadow a `Context` attribute or is private."""
