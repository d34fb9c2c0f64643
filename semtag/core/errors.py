"""Error codes for CLI exit status.

These map to shell exit codes and are used by every command to report the
kind of failure that occurred.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are process exit codes and should remain stable:
    - 0: Success
    - 1: User error (illegal version text, bad arguments)
    - 2: Configuration error (unreadable or invalid config file)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
