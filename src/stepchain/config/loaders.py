# topmark:header:start
#
#   project      : StepChain
#   file         : loaders.py
#   file_relpath : src/stepchain/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Load context seed values from TOML.

The CLI can start a composite from a TOML document. When the document has a
``[context]`` table, only that table is used; otherwise the whole document is
taken as the seed:

```toml
[context]
email = "ada@example.org"
quantity = 3
```

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from stepchain.config.logging import get_logger
from stepchain.constants import CONTEXT_TOML_TABLE

if TYPE_CHECKING:
    from pathlib import Path

    from stepchain.config.logging import StepchainLogger

logger: StepchainLogger = get_logger(__name__)


class SeedError(ValueError):
    """A TOML seed document or ``KEY=VALUE`` assignment could not be parsed."""


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Read ``path`` and return its content as a plain dict.

    Args:
        path (Path): TOML file to read.

    Returns:
        dict[str, Any]: The parsed document (tomlkit containers unwrapped).

    Raises:
        SeedError: If the file is not UTF-8 text or not valid TOML.
        OSError: If the file cannot be read (including `FileNotFoundError`).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SeedError(f"Cannot decode {path} as UTF-8: {exc}") from exc
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise SeedError(f"Invalid TOML in {path}: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise SeedError(f"Unknown error while reading TOML from {path}: {exc}") from exc
    logger.debug("Loaded TOML from %s", path)
    return doc.unwrap()


def load_context_seed(path: Path) -> dict[str, Any]:
    """Return the initial context values stored in ``path``.

    Raises:
        SeedError: If the file is not valid TOML or ``[context]`` is not a table.
    """
    data = load_toml_dict(path)
    if CONTEXT_TOML_TABLE not in data:
        return data
    table = data[CONTEXT_TOML_TABLE]
    if not isinstance(table, dict):
        raise SeedError(f"[{CONTEXT_TOML_TABLE}] in {path} must be a table")
    logger.trace("Using [%s] table from %s", CONTEXT_TOML_TABLE, path)
    return table


def parse_value(raw: str) -> Any:
    """Parse a TOML value (``3``, ``true``, ``[1, 2]``, ``"x"``), else keep the string.

    Args:
        raw (str): Text given on the command line.

    Returns:
        Any: The parsed value, or ``raw`` itself when it is not valid TOML.
    """
    try:
        return tomlkit.parse(f"value = {raw}").unwrap()["value"]
    except TomlkitParseError:
        return raw


def parse_assignment(assignment: str) -> tuple[str, Any]:
    """Split ``KEY=VALUE`` and parse the value.

    Raises:
        SeedError: If there is no ``=`` or the key is empty.
    """
    key, sep, raw = assignment.partition("=")
    key = key.strip()
    if not sep or not key:
        raise SeedError(f"Expected KEY=VALUE, got {assignment!r}")
    return key, parse_value(raw.strip())
