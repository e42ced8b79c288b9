"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from src.cli.utils.formatters import format_error, format_warning
from src.validators.consistency_validator import RepresentativeConflictError


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""


class DataValidationError(CLIError):
    """Error related to input data."""


def _echo_cli_error(label: str, error: CLIError) -> None:
    click.echo(format_error(f"{label}: {error.message}"), err=True)
    if error.recovery_hint:
        click.echo(format_warning(f"Hint: {error.recovery_hint}"), err=True)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Report an error to the user and choose the exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show the full stack trace

    Returns:
        Exit code: 2 configuration, 3 invalid data, 4 missing file,
        130 user abort, 1 anything else
    """
    if isinstance(error, ConfigurationError):
        _echo_cli_error("Configuration Error", error)
        return 2

    if isinstance(error, ValidationError):
        _echo_cli_error(
            "Configuration Error",
            ConfigurationError(
                str(error), recovery_hint="Check the variables in your .env file"
            ),
        )
        return 2

    if isinstance(error, DataValidationError):
        _echo_cli_error("Data Validation Error", error)
        return 3

    if isinstance(error, RepresentativeConflictError):
        click.echo(format_error(f"Data Validation Error: {error}"), err=True)
        click.echo(error.report.format(), err=True)
        click.echo(
            format_warning("Hint: Run without --strict to keep the first line's values"),
            err=True,
        )
        return 3

    if isinstance(error, FileNotFoundError):
        click.echo(format_error(f"File Not Found: {error}"), err=True)
        return 4

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return 130

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
    click.echo(str(error), err=True)
    if debug:
        click.echo("\nFull stack trace:", err=True)
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            ),
            err=True,
        )
    else:
        click.echo(format_warning("\nRun with --debug for full stack trace"), err=True)
    return 1


class ErrorHandler:
    """Context manager that exits with the code chosen by handle_cli_error."""

    def __init__(self, show_debug: bool):
        self.show_debug = show_debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # BaseExceptions such as SystemExit pass through untouched
        if isinstance(exc_val, Exception):
            sys.exit(handle_cli_error(exc_val, self.show_debug))
        return False


def with_error_handling(debug: bool = False) -> ErrorHandler:
    """
    Wrap a command body in standardized error handling.

    Args:
        debug: Whether to show full stack traces

    Example:
        with with_error_handling(debug):
            lines = load_lines(file_path)
    """
    return ErrorHandler(debug)
