# topmark:header:start
#
#   project      : StepChain
#   file         : __init__.py
#   file_relpath : src/stepchain/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""StepChain package.

StepChain composes discrete business-logic commands into ordered chains that
share one mutable context. Steps can be gated by guards, and the first failure
aborts the rest of the chain. A small CLI lists and runs composites.
"""

from __future__ import annotations

from stepchain.core import (
    Command,
    Composite,
    Context,
    DeclarationError,
    Failure,
    RegistrySealedError,
    ReservedNameError,
    StepchainError,
    StepDescriptor,
)

__all__ = [
    "Command",
    "Composite",
    "Context",
    "DeclarationError",
    "Failure",
    "RegistrySealedError",
    "ReservedNameError",
    "StepDescriptor",
    "StepchainError",
]
