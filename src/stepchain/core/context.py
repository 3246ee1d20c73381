# topmark:header:start
#
#   project      : StepChain
#   file         : context.py
#   file_relpath : src/stepchain/core/context.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Shared, mutable context threaded through a chain of commands.

A `Context` is an attribute bag: every command of one invocation reads and
writes the same instance, so a value set by one step is visible to the guards
and steps that follow it. Reading an attribute that was never set returns
``None`` rather than raising, which keeps guards such as
``return self.context.user is None`` short.

Besides the user data, the context keeps the bookkeeping needed by the
command lifecycle:

- the success/failure flag, flipped by `Context.fail`;
- the ordered list of commands that completed successfully, used by
  `Context.rollback` to undo them newest-first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from stepchain.config.logging import get_logger
from stepchain.core.errors import Failure, ReservedNameError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from stepchain.config.logging import StepchainLogger
    from stepchain.core.contracts import Rollbackable

logger: StepchainLogger = get_logger(__name__)

# Names handled by the class itself and never stored as user data.
_RESERVED: Final[frozenset[str]] = frozenset({"success", "failure"})


def _check_names(names: Iterable[str]) -> None:
    """Reject names that attribute access could never return as data.

    Raises:
        ReservedNameError: For private names, outcome flags, or names of
            `Context` attributes such as ``get`` or ``rollback``.
    """
    for name in names:
        if name.startswith("_") or name in _RESERVED or hasattr(Context, name):
            raise ReservedNameError(f"Cannot use reserved context attribute {name!r}")


class Context:
    """Mutable attribute bag shared by every command of one invocation.

    Args:
        data (Mapping[str, Any] | None): Initial values.
        **kwargs (Any): Additional initial values (override ``data``).
    """

    _data: dict[str, Any]
    _failure: bool
    _called: list[Rollbackable]
    _rolled_back: bool

    def __init__(self, data: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        merged: dict[str, Any] = {**(data or {}), **kwargs}
        _check_names(merged)
        object.__setattr__(self, "_data", merged)
        object.__setattr__(self, "_failure", False)
        object.__setattr__(self, "_called", [])
        object.__setattr__(self, "_rolled_back", False)

    @classmethod
    def build(cls, context: Context | Mapping[str, Any] | None = None, **data: Any) -> Context:
        """Return a context for a new invocation.

        An existing `Context` is returned as-is (after merging ``data``) so that
        nested commands share one instance; a mapping or ``None`` is wrapped
        in a fresh context.

        Args:
            context (Context | Mapping[str, Any] | None): Existing context or seed values.
            **data (Any): Extra values merged into the context.

        Returns:
            Context: The context to run with.
        """
        if isinstance(context, Context):
            context.update(data)
            return context
        return cls(context, **data)

    # --- data access ---

    def __getattr__(self, name: str) -> Any:
        # Only called when regular lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        return self._data.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        _check_names((name,))
        self._data[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._data[name]
        except KeyError:
            raise AttributeError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._data.items())
        return f"{type(self).__name__}({fields})"

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value stored under ``name``, or ``default``."""
        return self._data.get(name, default)

    def update(self, data: Mapping[str, Any]) -> None:
        """Merge ``data`` into the context.

        Raises:
            ReservedNameError: If a key is not a valid data name.
        """
        _check_names(data)
        self._data.update(data)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the user data."""
        return dict(self._data)

    # --- outcome ---

    @property
    def success(self) -> bool:
        """True until `fail` has been called."""
        return not self._failure

    @property
    def failure(self) -> bool:
        """True once `fail` has been called."""
        return self._failure

    def fail(self, **data: Any) -> None:
        """Mark the context as failed and abort the running chain.

        Args:
            **data (Any): Values merged into the context before raising,
                typically ``error="..."``.

        Raises:
            ReservedNameError: If a key in ``data`` is not a valid data name.
            Failure: Always; carries this context.
        """
        self.update(data)
        object.__setattr__(self, "_failure", True)
        raise Failure(self)

    # --- rollback bookkeeping ---

    def called(self, command: Rollbackable) -> None:
        """Record ``command`` as successfully completed."""
        self._called.append(command)

    @property
    def called_commands(self) -> tuple[Rollbackable, ...]:
        """Commands completed so far, oldest first."""
        return tuple(self._called)

    def rollback(self) -> bool:
        """Undo completed commands in reverse order.

        Rolling back happens at most once per context; later calls are no-ops.

        Returns:
            bool: True if this call performed the rollback.
        """
        if self._rolled_back:
            return False
        object.__setattr__(self, "_rolled_back", True)
        for command in reversed(self._called):
            logger.debug("Rolling back %s", type(command).__name__)
            command.rollback()
        return True
