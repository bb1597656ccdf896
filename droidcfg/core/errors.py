"""Error codes for CLI exit status.

Every failure of a build-descriptor invocation is terminal; the code tells
the calling build script which kind of failure stopped it.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad option, malformed -P override)
    - 2: Config error (malformed properties file, invalid version fields)
    - 3: Signing error (release requested with incomplete credentials)
    - 5: I/O error (unreadable input, unwritable output)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    SIGNING_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
