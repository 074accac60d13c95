"""Process exit codes.

The calling pipeline only sees pass/fail plus this code, so the values must
stay stable:
- 0: Success
- 1: User error (bad input, malformed tag, invalid config)
- 2: Environment error (git missing or failing, branch unknown)
- 3: Descriptor error (version property not found)
- 4: Remote error (push rejected)
- 5: I/O error (descriptor file missing or unwritable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    DESCRIPTOR_ERROR = 3
    REMOTE_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")
