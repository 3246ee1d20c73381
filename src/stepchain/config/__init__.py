# topmark:header:start
#
#   project      : StepChain
#   file         : __init__.py
#   file_relpath : src/stepchain/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Logging setup and TOML loading for StepChain."""
