# topmark:header:start
#
#   project      : StepChain
#   file         : __main__.py
#   file_relpath : src/stepchain/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Allow ``python -m stepchain``."""

from stepchain.cli.main import cli

if __name__ == "__main__":
    cli()
