# topmark:header:start
#
#   project      : StepChain
#   file         : test_engine.py
#   file_relpath : tests/core/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Tests for the execution engine: guard gating, fail-fast and shared context."""

from __future__ import annotations

from typing import Any

import pytest

from stepchain import Command, Composite, Context, Failure
from stepchain.config.logging import TRACE_LEVEL
from stepchain.core.engine import evaluate_guard, execute
from stepchain.core.registry import normalize_steps
from tests.conftest import mark_engine, parametrize
from tests.core.conftest import make_step, trail

A = make_step("A")
B = make_step("B")
C = make_step("C")


@mark_engine
def test_steps_run_in_declared_order() -> None:
    class Flow(Composite):
        steps = (A, B, C)

    ctx = Flow.run()

    assert ctx.success
    assert trail(ctx) == ["A", "B", "C"]


@mark_engine
def test_empty_composite_succeeds_trivially() -> None:
    class Flow(Composite):
        pass

    ctx = Flow.run_strict(Context(answer=42))

    assert ctx.success
    assert ctx.to_dict() == {"answer": 42}


@mark_engine
@parametrize("wanted, expected", [(False, ["B"]), (True, ["A", "B"])])
def test_guard_gates_its_step(wanted: bool, expected: list[str]) -> None:
    class Flow(Composite):
        steps = ({"step": A, "if": "wants_a"}, B)

        def wants_a(self) -> bool:
            return wanted

    assert trail(Flow.run()) == expected


@mark_engine
def test_step_failure_stops_the_chain() -> None:
    failing = make_step("Failing", fail=True)

    class Flow(Composite):
        steps = (A, failing, C)

    ctx = Context()
    with pytest.raises(Failure) as excinfo:
        Flow.run_strict(ctx)

    assert excinfo.value.context is ctx
    assert str(excinfo.value) == "Failing failed"
    assert trail(ctx) == ["A", "Failing"]
    assert ctx.failure


@mark_engine
def test_run_reports_the_first_failure_only() -> None:
    first = make_step("First", fail=True)
    second = make_step("Second", fail=True)

    class Flow(Composite):
        steps = (first, second)

    ctx = Flow.run()

    assert ctx.failure
    assert ctx.error == "First failed"
    assert trail(ctx) == ["First"]


@mark_engine
def test_unexpected_exception_propagates_from_run() -> None:
    broken = make_step("Broken", raises=ValueError)

    class Flow(Composite):
        steps = (A, broken, C)

    ctx = Context()
    with pytest.raises(ValueError, match="Broken exploded"):
        Flow.run(ctx)

    assert trail(ctx) == ["A", "Broken"]
    # Only `fail()` marks the context as failed.
    assert ctx.success


@mark_engine
def test_mutations_are_visible_to_later_steps_and_guards() -> None:
    class Fetch(Command):
        def call(self) -> None:
            self.context.user = "ada"

    class Check(Command):
        def call(self) -> None:
            self.context.seen = self.context.user

    class Flow(Composite):
        steps = (Fetch, {"step": Check, "if": "has_user"})

        def has_user(self) -> bool:
            return self.context.user is not None

    ctx = Flow.run(user=None)

    assert ctx.seen == "ada"


@mark_engine
def test_guards_are_evaluated_right_before_their_step() -> None:
    class Flow(Composite):
        steps = (A, {"step": B, "if": "log_guard"}, {"step": C, "if": "log_guard"})

        def log_guard(self) -> bool:
            self.context.trail = [*trail(self.context), "guard"]
            return True

    assert trail(Flow.run()) == ["A", "guard", "B", "guard", "C"]


@mark_engine
def test_missing_guard_method_raises() -> None:
    class Flow(Composite):
        steps = (A, {"step": B, "if": "no_such_predicate"}, C)

    ctx = Context()
    with pytest.raises(AttributeError, match="no_such_predicate"):
        Flow.run(ctx)

    assert trail(ctx) == ["A"]


@mark_engine
def test_guard_exception_propagates() -> None:
    class Flow(Composite):
        steps = ({"step": A, "if": "explode"},)

        def explode(self) -> bool:
            raise LookupError("guard broke")

    with pytest.raises(LookupError, match="guard broke"):
        Flow.run()


@mark_engine
def test_callable_guard_receives_the_composite_instance() -> None:
    seen: list[object] = []

    def guard(owner: Any) -> bool:
        seen.append(owner)
        return owner.context.enabled

    class Flow(Composite):
        steps = ({"step": A, "guard": guard}, B)

    ctx = Flow.run(enabled=False)

    assert trail(ctx) == ["B"]
    assert len(seen) == 1
    assert isinstance(seen[0], Flow)


@mark_engine
def test_guard_calling_fail_aborts_the_chain() -> None:
    class Flow(Composite):
        steps = ({"step": A, "if": "refuse"}, B)

        def refuse(self) -> bool:
            self.context.fail(error="refused")
            return True

    ctx = Flow.run()

    assert ctx.failure
    assert ctx.error == "refused"
    assert trail(ctx) == []


@mark_engine
@parametrize(
    "value, expected",
    [
        (True, True),
        (1, True),
        ("yes", True),
        ([0], True),
        (False, False),
        (0, False),
        ("", False),
        (None, False),
        ([], False),
    ],
)
def test_evaluate_guard_uses_truthiness(value: object, expected: bool) -> None:
    class Owner:
        def predicate(self) -> object:
            return value

    assert evaluate_guard(Owner(), "predicate") is expected
    assert evaluate_guard(Owner(), lambda _owner: value) is expected


@mark_engine
def test_execute_accepts_any_object_with_run_strict() -> None:
    calls: list[tuple[str, Context]] = []

    class Duck:
        def __init__(self, name: str) -> None:
            self.name = name

        def run_strict(self, context: Context) -> None:
            calls.append((self.name, context))

    ctx = Context()
    execute(object(), normalize_steps([Duck("x"), Duck("y")]), ctx)

    assert [name for name, _ in calls] == ["x", "y"]
    assert all(context is ctx for _, context in calls)


@mark_engine
def test_engine_emits_trace_records(caplog: pytest.LogCaptureFixture) -> None:
    class Flow(Composite):
        steps = ({"step": A, "if": "never"}, B)

        def never(self) -> bool:
            return False

    with caplog.at_level(TRACE_LEVEL, logger="stepchain"):
        Flow.run()

    messages: list[str] = [r.getMessage() for r in caplog.records]
    assert any("A skipped (guard never)" in m for m in messages)
    assert any("B - running" in m for m in messages)


def _nested(inner_steps: tuple[object, ...]) -> type[Composite]:
    class Inner(Composite):
        steps = inner_steps

    class Outer(Composite):
        steps = (A, Inner, C)

    return Outer


@mark_engine
def test_composites_nest_as_steps() -> None:
    outer = _nested((B,))

    assert trail(outer.run()) == ["A", "B", "C"]


@mark_engine
def test_nested_failure_aborts_the_outer_chain() -> None:
    outer = _nested((make_step("Inner1", fail=True), B))

    ctx = outer.run()

    assert ctx.failure
    assert ctx.error == "Inner1 failed"
    assert trail(ctx) == ["A", "Inner1"]
