# topmark:header:start
#
#   project      : StepChain
#   file         : __init__.py
#   file_relpath : src/stepchain/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Command-line interface for inspecting and running StepChain composites."""
