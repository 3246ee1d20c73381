# topmark:header:start
#
#   project      : StepChain
#   file         : __init__.py
#   file_relpath : src/stepchain/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""StepChain core: commands, composites, the declaration registry and the engine.

This package is CLI-free. Nothing here prints; diagnostics go through
[`stepchain.config.logging`][stepchain.config.logging].
"""

from __future__ import annotations

from .command import Command
from .composite import Composite
from .context import Context
from .contracts import Guard, Rollbackable, Step
from .engine import evaluate_guard, execute
from .errors import (
    DeclarationError,
    Failure,
    RegistrySealedError,
    ReservedNameError,
    StepchainError,
)
from .registry import StepDescriptor, StepRegistry, normalize_steps

__all__ = [
    "Command",
    "Composite",
    "Context",
    "DeclarationError",
    "Failure",
    "Guard",
    "RegistrySealedError",
    "ReservedNameError",
    "Rollbackable",
    "Step",
    "StepDescriptor",
    "StepRegistry",
    "StepchainError",
    "evaluate_guard",
    "execute",
    "normalize_steps",
]
