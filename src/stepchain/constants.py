# topmark:header:start
#
#   project      : StepChain
#   file         : constants.py
#   file_relpath : src/stepchain/constants.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""StepChain Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    STEPCHAIN_VERSION: str = get_version("stepchain")
except PackageNotFoundError:  # pragma: no cover - running from an uninstalled checkout
    STEPCHAIN_VERSION = "0.0.0"

LOG_LEVEL_ENV_VAR: str = "STEPCHAIN_LOG_LEVEL"

# Table of a TOML seed file holding the initial context values:
CONTEXT_TOML_TABLE: str = "context"

# Separator between module path and attribute in CLI targets ("pkg.mod:Class"):
TARGET_SEPARATOR: str = ":"
