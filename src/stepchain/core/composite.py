# topmark:header:start
#
#   project      : StepChain
#   file         : composite.py
#   file_relpath : src/stepchain/core/composite.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Composite commands: an ordered chain of steps sharing one context.

A composite declares its steps once, at class definition time, either in the
class body or with `Composite.declare`:

```python
class PlaceOrder(Composite):
    steps = (
        LoadCart,
        {"step": ApplyCoupon, "if": "has_coupon"},
        ChargeCard,
    )

    def has_coupon(self) -> bool:
        return self.context.coupon is not None


PlaceOrder.declare(SendReceipt)  # appended after ChargeCard
```

Invoking the composite (``PlaceOrder.run(ctx)`` or ``run_strict``) runs the
declared steps in order, skipping those whose guard is falsy, and stops at the
first failure. Because a composite is itself a `Command`, it can be declared
as a step of another composite.

Each class owns its own registry: a subclass does not inherit the steps of
its parent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from stepchain.core.command import Command
from stepchain.core.engine import execute
from stepchain.core.registry import StepRegistry, normalize_steps

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stepchain.core.registry import StepDescriptor

_REGISTRY_ATTR = "_stepchain_registry"


class Composite(Command):
    """A command whose `call()` runs its declared steps.

    Attributes:
        steps (Sequence[Any]): Optional class-body declaration; normalized and
            declared once when the subclass is created.
    """

    steps: ClassVar[Sequence[Any]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        body_steps = cls.__dict__.get("steps")
        if body_steps:
            cls.declare(body_steps)

    @classmethod
    def registry(cls) -> StepRegistry:
        """Return this class's own registry, creating it on first access."""
        registry: StepRegistry | None = cls.__dict__.get(_REGISTRY_ATTR)
        if registry is None:
            registry = StepRegistry(owner=cls.__qualname__)
            setattr(cls, _REGISTRY_ATTR, registry)
        return registry

    @classmethod
    def declare(cls, *steps: Any) -> None:
        """Append steps to this composite, in the order given.

        Args:
            *steps (Any): Steps, a single list/tuple of steps, `StepDescriptor`
                instances, or ``{"step": ..., "if": ...}`` mappings.
        """
        cls.registry().extend(normalize_steps(steps))

    @classmethod
    def declared(cls) -> tuple[StepDescriptor, ...]:
        """Return the declared descriptors in execution order (empty by default)."""
        return cls.registry().descriptors

    def call(self) -> None:
        """Run the declared steps against ``self.context``.

        Composites are not expected to override this method.
        """
        registry = type(self).registry()
        registry.seal()
        execute(self, registry.descriptors, self.context)
