"""CLI error handling for member order checks."""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import override

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from member_order.errors import InvalidConfigurationError, ParserError

logger = logging.getLogger(__name__)
console = Console()

# Exit code for configuration and input errors; 1 is reserved for violations
ERROR_EXIT_CODE = 2

_CATEGORIES_HINT = "Run 'member-order categories' to list the valid order options."


class CLIError(Exception):
    """A command failure as shown to the user.

    Carries the failing command, the underlying error and an optional hint
    that tells the user how to recover.
    """

    def __init__(
        self,
        message: str,
        command: str | None = None,
        original_error: Exception | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialise CLI error with context.

        Args:
            message: Human-readable error message describing what went wrong
            command: Name of the CLI command that failed (e.g., "check")
            original_error: The underlying exception that caused this CLI error
            hint: Suggested next step for the user

        """
        super().__init__(message)
        self.command = command
        self.original_error = original_error
        self.hint = hint

    @classmethod
    def from_error(cls, error: Exception, command: str) -> CLIError:
        """Describe a domain error for display.

        Configuration errors naming a bad order entry point the user at the
        category listing; source errors say which input could not be checked.
        """
        if isinstance(error, CLIError):
            return error
        if isinstance(error, InvalidConfigurationError):
            hint = _CATEGORIES_HINT if error.entry is not None else None
            return cls(
                f"Configuration error: {error}",
                command=command,
                original_error=error,
                hint=hint,
            )
        if isinstance(error, ParserError):
            return cls(
                f"Cannot check source: {error}", command=command, original_error=error
            )
        return cls(str(error), command=command, original_error=error)

    @override
    def __str__(self) -> str:
        """Return formatted error message with CLI context."""
        base_message = super().__str__()
        if self.command:
            return f"CLI command '{self.command}' failed: {base_message}"
        return base_message


def _print_error_panel(error: CLIError, title: str) -> None:
    body = f"[red]{escape(str(error))}[/red]"
    if error.hint:
        body += f"\n[dim]{escape(error.hint)}[/dim]"
    console.print(Panel(body, title=f"❌ {title}", border_style="red"))


@contextmanager
def cli_error_handler(command: str, title: str) -> Generator[None]:
    """Context manager for unified CLI error handling.

    Converts exceptions into CLIError, displays them as Rich error panels,
    and exits with ERROR_EXIT_CODE.

    Args:
        command: CLI command name for error context.
        title: Panel title for the error display.

    """
    try:
        yield
    except Exception as e:
        cli_error = CLIError.from_error(e, command)
        logger.error("%s: %s", title, cli_error)
        _print_error_panel(cli_error, title)
        raise typer.Exit(ERROR_EXIT_CODE) from e
