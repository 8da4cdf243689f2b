from __future__ import annotations

"""
Domain Error Taxonomy.

Every fatal condition of the tool is detected while parsing or validating
the invocation, before any enumeration starts. Each error carries the process
exit code the CLI controller must return.
"""

EXIT_CODE_SUCCESS = 0
EXIT_CODE_ERROR = 1


class FsCountError(Exception):
    """Base class for all terminal errors raised by fscount."""

    exit_code: int = EXIT_CODE_ERROR


class UsageError(FsCountError):
    """The command line does not follow the documented usage."""


class UnknownFlagError(UsageError):
    """An option token was not recognised by the parser."""


class InvalidLogLevelError(FsCountError):
    """The requested log level is not one of NONE, ERROR, INFO, DEBUG."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid log level {token}.")
        self.token = token


class TooManyPositionalArgumentsError(FsCountError):
    """More than one bare directory argument was supplied."""

    def __init__(self, count: int) -> None:
        super().__init__(
            f"Provided {count} arguments. There's only 1 argument supported, "
            f"which is the directory path."
        )
        self.count = count


class TargetDirectoryError(FsCountError):
    """The target directory does not exist or is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Target directory does not exist or is not a directory: {path}")
        self.path = path
