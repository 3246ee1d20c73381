# topmark:header:start
#
#   project      : StepChain
#   file         : conftest.py
#   file_relpath : tests/core/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Helpers for core tests: recording commands built on the fly.

Every command made by `make_step` appends its name to ``context.trail`` when it
runs and to ``context.undone`` when it is rolled back, so tests can assert on
the exact order of calls.
"""

from __future__ import annotations

from typing import Any

from stepchain import Command


def _append(context: Any, key: str, value: str) -> None:
    setattr(context, key, [*(context.get(key) or []), value])


def make_step(
    name: str,
    *,
    fail: bool = False,
    raises: type[Exception] | None = None,
    sets: dict[str, Any] | None = None,
) -> type[Command]:
    """Return a new `Command` subclass named ``name``.

    Args:
        name (str): Class name, also recorded in ``context.trail``.
        fail (bool): Call ``context.fail(error=f"{name} failed")`` after recording.
        raises (type[Exception] | None): Raise this exception after recording.
        sets (dict[str, Any] | None): Values written to the context before failing.

    Returns:
        type[Command]: The command class.
    """

    def call(self: Command) -> None:
        _append(self.context, "trail", name)
        for key, value in (sets or {}).items():
            setattr(self.context, key, value)
        if fail:
            self.context.fail(error=f"{name} failed")
        if raises is not None:
            raise raises(f"{name} exploded")

    def rollback(self: Command) -> None:
        _append(self.context, "undone", name)

    return type(name, (Command,), {"call": call, "rollback": rollback, "__module__": __name__})


def trail(context: Any) -> list[str]:
    """Return the names recorded in ``context.trail`` (empty if nothing ran)."""
    return list(context.get("trail") or [])


def undone(context: Any) -> list[str]:
    """Return the names recorded in ``context.undone`` (empty if nothing was undone)."""
    return list(context.get("undone") or [])
