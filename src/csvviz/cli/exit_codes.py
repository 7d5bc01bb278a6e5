"""
Standardized exit codes for csvviz CLI commands.

Scripts can tell a broken file apart from a file that simply has nothing to
chart:

- 0: success
- 1: the file could not be loaded, or a bad option value
- 2: configuration error
- 3: the selection produced no chartable data
- 4: the dataset has fewer than two columns
- 130: cancelled by the user
"""

import sys
from typing import Optional

import typer


# Exit code constants
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_NO_DATA = 3
EXIT_INSUFFICIENT_COLUMNS = 4
EXIT_USER_CANCEL = 130  # Standard for SIGINT (Ctrl+C)


class CliExit(typer.Exit):
    """
    typer.Exit with a predictable code and an optional message.

    Usage:
        raise CliExit.error("Could not read data.csv")
        raise CliExit.no_data()
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.message = message
        super().__init__(code)
        if message:
            # Messages go to stderr so --json stdout stays parseable
            print(message, file=sys.stderr)

    @classmethod
    def success(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_SUCCESS, message)

    @classmethod
    def error(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_ERROR, message)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_CONFIG_ERROR, message)

    @classmethod
    def no_data(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_NO_DATA, message)

    @classmethod
    def insufficient_columns(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_INSUFFICIENT_COLUMNS, message)

    @classmethod
    def user_cancel(cls, message: Optional[str] = None) -> "CliExit":
        return cls(EXIT_USER_CANCEL, message or "Operation cancelled by user")
