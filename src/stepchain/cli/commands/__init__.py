# topmark:header:start
#
#   project      : StepChain
#   file         : __init__.py
#   file_relpath : src/stepchain/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Click subcommands of the StepChain CLI."""
