# topmark:header:start
#
#   project      : StepChain
#   file         : registry.py
#   file_relpath : src/stepchain/core/registry.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Declaration registry: the ordered steps of one composite type.

Each composite class owns exactly one `StepRegistry`. Steps are declared once,
while the class is being defined, and read on every invocation:

- insertion order is execution order (no reordering or deduplication);
- declaring again appends, it never replaces;
- the registry is sealed the first time the composite runs, after which any
  further declaration raises `RegistrySealedError`.

Accepted declaration items
--------------------------
``declare(*items)`` normalizes each item into a `StepDescriptor`:

- a step (anything with ``run_strict(context)``) -> ``StepDescriptor(step)``;
- a list or tuple of items -> flattened one level;
- a `StepDescriptor` -> kept as-is;
- a mapping ``{"step": X, "if": "predicate"}`` -> ``StepDescriptor(X, "predicate")``
  (``"guard"`` is accepted as an alias of ``"if"``; giving both is an error).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

from stepchain.config.logging import get_logger
from stepchain.core.errors import DeclarationError, RegistrySealedError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from stepchain.config.logging import StepchainLogger
    from stepchain.core.contracts import Guard, Step

logger: StepchainLogger = get_logger(__name__)

STEP_KEY: Final[str] = "step"
GUARD_KEYS: Final[tuple[str, ...]] = ("if", "guard")


@dataclass(frozen=True)
class StepDescriptor:
    """One declared step and the optional guard gating it.

    Attributes:
        step (Step): The unit of work invoked with the shared context.
        guard (Guard | None): Predicate method name on the composite instance, or
            a callable receiving that instance. ``None`` means "always run".
    """

    step: Step
    guard: Guard | None = None

    def __post_init__(self) -> None:
        if self.guard is not None and not (isinstance(self.guard, str) or callable(self.guard)):
            raise DeclarationError(
                f"Guard for {describe_step(self.step)} must be a method name or a callable, "
                f"got {type(self.guard).__name__}"
            )

    @property
    def step_name(self) -> str:
        """Human readable name of the step."""
        return describe_step(self.step)

    @property
    def guard_name(self) -> str | None:
        """Human readable name of the guard, if any."""
        if self.guard is None:
            return None
        if isinstance(self.guard, str):
            return self.guard
        return getattr(self.guard, "__qualname__", None) or repr(self.guard)


def describe_step(step: object) -> str:
    """Return the qualified name of a step class, or of an instance's class."""
    name = getattr(step, "__qualname__", None)
    if isinstance(name, str):
        return name
    return type(step).__qualname__


def _as_descriptor(item: object) -> StepDescriptor:
    if isinstance(item, StepDescriptor):
        return item
    if isinstance(item, Mapping):
        mapping: Mapping[str, Any] = item
        unknown = sorted(set(mapping) - {STEP_KEY, *GUARD_KEYS})
        if unknown:
            raise DeclarationError(f"Unknown step declaration key(s): {', '.join(unknown)}")
        if STEP_KEY not in mapping:
            raise DeclarationError(f"Step declaration {dict(mapping)!r} has no {STEP_KEY!r} key")
        guards = [mapping[k] for k in GUARD_KEYS if mapping.get(k) is not None]
        if len(guards) > 1:
            raise DeclarationError(
                f"Step declaration for {describe_step(mapping[STEP_KEY])} sets both "
                f"{GUARD_KEYS[0]!r} and {GUARD_KEYS[1]!r}; use one of them"
            )
        guard = guards[0] if guards else None
        return StepDescriptor(step=mapping[STEP_KEY], guard=guard)
    return StepDescriptor(step=item)  # type: ignore[arg-type]


def normalize_steps(items: Iterable[object]) -> tuple[StepDescriptor, ...]:
    """Normalize declaration items into descriptors, flattening one level.

    Args:
        items (Iterable[object]): Items as passed to ``declare``.

    Returns:
        tuple[StepDescriptor, ...]: Descriptors in the order given.

    Raises:
        DeclarationError: If a mapping item is malformed or a guard has the wrong type.
    """
    flat: list[object] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        else:
            flat.append(item)
    return tuple(_as_descriptor(item) for item in flat)


@dataclass
class StepRegistry:
    """Ordered, append-only list of step descriptors for one composite type.

    Attributes:
        owner (str): Qualified name of the owning composite (for messages).
    """

    owner: str
    _descriptors: list[StepDescriptor] = field(default_factory=list)
    _sealed: bool = False

    def extend(self, descriptors: Iterable[StepDescriptor]) -> None:
        """Append ``descriptors`` in order.

        Raises:
            RegistrySealedError: If the owning composite has already run.
        """
        if self._sealed:
            raise RegistrySealedError(
                f"Cannot declare steps on {self.owner}: it has already been executed"
            )
        added = list(descriptors)
        self._descriptors.extend(added)
        logger.trace(
            "Registry %s: declared %s", self.owner, [d.step_name for d in added]
        )

    def seal(self) -> None:
        """Freeze the registry; idempotent."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        """Whether declarations are still accepted."""
        return self._sealed

    @property
    def descriptors(self) -> tuple[StepDescriptor, ...]:
        """Snapshot of the declared descriptors, in execution order."""
        return tuple(self._descriptors)

    def __iter__(self) -> Iterator[StepDescriptor]:
        return iter(self.descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

