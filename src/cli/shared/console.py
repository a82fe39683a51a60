"""Shared console output for CLI commands.

This module provides the rich console wrapper used by every command,
including status lines, prompts, confirmation dialogs and error handling.
"""

from collections.abc import Callable
from functools import wraps
from typing import NoReturn

import typer
from loguru import logger
from rich.console import Console, ConsoleRenderable
from rich.markup import escape
from rich.panel import Panel

from src.cli.deployment.errors import DevEnvError

CONFIRMATION_TOKEN = "yes"


class CLIConsole:
    """Rich console wrapper for consistent CLI output."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the CLI console."""
        self.console = console or Console(highlight=False)

    def print(self, msg: ConsoleRenderable | str | None = None) -> None:
        if msg is None:
            self.console.print()
        else:
            self.console.print(msg)

    def line(self, text: str) -> None:
        """Print plain text with markup disabled."""
        self.console.print(text, markup=False)

    def info(self, msg: str) -> None:
        self.console.print(f"[blue]ℹ {escape(msg)}[/blue]")

    def ok(self, msg: str) -> None:
        self.console.print(f"[green]✓ {escape(msg)}[/green]")

    def error(self, msg: str) -> None:
        self.console.print(f"[red]✗ {escape(msg)}[/red]")

    def warn(self, msg: str) -> None:
        self.console.print(f"[yellow]⚠ {escape(msg)}[/yellow]")

    def print_header(self, title: str, style: str = "blue") -> None:
        """Print a styled header panel.

        Args:
            title: Header title text
            style: Border style color
        """
        self.console.print(
            Panel.fit(
                f"[bold {style}]{escape(title)}[/bold {style}]",
                border_style=style,
            )
        )

    def prompt(
        self, label: str, *, password: bool = False, default: str | None = None
    ) -> str:
        """Read one line from the user.

        Args:
            label: Prompt text shown before the cursor
            password: Do not echo the input
            default: Value returned when the input is blank

        Returns:
            The stripped answer, or ``default`` for a blank answer
        """
        answer = self.console.input(f"{escape(label)}: ", password=password).strip()
        if not answer and default is not None:
            return default
        return answer

    def confirm_action(self, action: str, details: str | None = None) -> bool:
        """Prompt user to confirm a destructive action.

        Only the exact answer ``yes`` confirms; anything else, including
        ``y`` or an interrupted prompt, declines.

        Args:
            action: Description of the action (e.g., "Remove all volumes")
            details: Additional details about what will be affected

        Returns:
            True if the user confirmed, False otherwise
        """
        warning_lines = [f"[bold red]⚠  {escape(action)}[/bold red]"]
        if details:
            warning_lines.append(f"\n{escape(details)}")

        self.console.print(
            Panel(
                "\n".join(warning_lines),
                title="Confirmation Required",
                border_style="red",
            )
        )

        try:
            response = self.console.input("Are you sure? (yes/no): ")
        except (KeyboardInterrupt, EOFError):
            self.console.print("\n[dim]Cancelled.[/dim]")
            return False
        return response.strip() == CONFIRMATION_TOKEN

    def handle_error(
        self, message: str, details: str | None = None, exit_code: int = 1
    ) -> NoReturn:
        """Handle an error by printing a message and exiting.

        Args:
            message: Error message to display
            details: Optional additional details
            exit_code: Exit code to use
        """
        self.error(message)
        if details:
            self.console.print(Panel(escape(details), title="Details", border_style="red"))
        raise typer.Exit(exit_code)


def with_error_handling(func: Callable[..., int]) -> Callable[..., int]:
    """Decorator to wrap command handlers with standard error handling.

    DevEnvError is printed and turned into ``typer.Exit`` carrying the
    error's exit code; Ctrl+C exits with 130. Errors go to the console passed
    as the ``out`` keyword argument, or to the shared console.

    Args:
        func: The command function to wrap

    Returns:
        Wrapped function with error handling
    """

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> int:
        out = kwargs.get("out")
        reporter = out if isinstance(out, CLIConsole) else console
        try:
            return func(*args, **kwargs)
        except DevEnvError as e:
            logger.debug(f"{func.__name__} failed: {e.message}")
            reporter.handle_error(e.message, e.details, e.exit_code)
        except KeyboardInterrupt:
            reporter.print("\n[dim]Operation cancelled by user.[/dim]")
            raise typer.Exit(130) from None

    return wrapper


# Shared console instance for consistent output
console = CLIConsole()
