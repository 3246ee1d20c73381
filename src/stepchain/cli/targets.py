# topmark:header:start
#
#   project      : StepChain
#   file         : targets.py
#   file_relpath : src/stepchain/cli/targets.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Resolve ``package.module:ClassName`` targets to composite classes."""

from __future__ import annotations

import importlib
import inspect

from stepchain.cli.errors import StepchainUsageError
from stepchain.config.logging import get_logger
from stepchain.constants import TARGET_SEPARATOR
from stepchain.core.composite import Composite

logger = get_logger(__name__)


def load_composite(target: str) -> type[Composite]:
    """Import ``target`` and return the composite class it names.

    Dotted attribute paths are allowed after the separator
    (``pkg.flows:Checkout.Inner``).

    Args:
        target (str): ``module:attribute`` reference.

    Returns:
        type[Composite]: The composite class.

    Raises:
        StepchainUsageError: If the target is malformed, cannot be imported, or
            does not name a `Composite` subclass.
    """
    module_name, sep, attr_path = target.partition(TARGET_SEPARATOR)
    if not sep or not module_name or not attr_path:
        raise StepchainUsageError(
            f"Invalid target {target!r}: expected 'package.module{TARGET_SEPARATOR}ClassName'."
        )

    try:
        obj: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise StepchainUsageError(f"Cannot import module {module_name!r}: {exc}") from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise StepchainUsageError(f"{target!r}: no attribute {part!r}") from exc

    if not (inspect.isclass(obj) and issubclass(obj, Composite)):
        raise StepchainUsageError(f"{target!r} is not a Composite subclass.")

    logger.debug("Resolved target %s to %s", target, obj)
    return obj
