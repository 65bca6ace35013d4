"""Shared error handling for stylegen."""

import sys
from typing import NoReturn

import typer


class StylegenError(Exception):
    """Base exception for stylegen operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class SpecNotFoundError(StylegenError):
    """Raised when the style specification document is missing."""

    def __init__(self, path: object = None) -> None:
        self.path = path
        super().__init__(
            'Could not find style spec, try running "yarn run fetch:style:spec"',
            exit_code=1,
        )


class FormatterError(StylegenError):
    """Raised when the code formatter exits with an error."""

    def __init__(self, filename: str, detail: str) -> None:
        self.filename = filename
        super().__init__(f"Failed to format {filename}: {detail}", exit_code=1)


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(message, err=True)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Report a stylegen error and exit with its code.

    Anything that is not a StylegenError is re-raised untouched.
    """
    if isinstance(error, StylegenError):
        exit_with_error(error.message, error.exit_code)
    raise error
