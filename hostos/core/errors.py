"""Error codes for CLI exit status.

These map to shell exit codes and are used by every command to report
the kind of failure that occurred.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable.
    - 0: Success
    - 1: User error (bad input, invalid arguments)
    - 2: Environment error (executable not found on the search path)
    - 5: I/O error (config file unreadable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
