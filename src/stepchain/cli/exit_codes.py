# topmark:header:start
#
#   project      : StepChain
#   file         : exit_codes.py
#   file_relpath : src/stepchain/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 StepChain contributors
#
# topmark:header:end

"""Exit codes for the StepChain CLI.

StepChain aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. ``FAILURE`` is reserved for
a composite that ran and reported a failure through its context.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the StepChain CLI.

    Attributes:
        SUCCESS: The command (and the composite, for ``run``) succeeded.
        FAILURE: The composite ran and its context was marked as failed.
        USAGE_ERROR: Invalid flags/args or an unresolvable target. Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: A context seed file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        PIPELINE_ERROR: A step or guard raised an unexpected exception.
            Mirrors BSD ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Malformed context seed (invalid TOML). Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    PIPELINE_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG
