"""Small builders shared by unit tests."""

from unittest.mock import Mock

from src.cli.deployment.shell_commands import CommandResult


def ok_result(stdout: str = "") -> CommandResult:
    return CommandResult(success=True, stdout=stdout, returncode=0)


def failed_result(returncode: int = 1, stdout: str = "") -> CommandResult:
    return CommandResult(success=False, stdout=stdout, returncode=returncode)


def printed_lines(console: Mock) -> list[str]:
    """Collect every plain line printed through ``CLIConsole.line``."""
    return [call.args[0] for call in console.line.call_args_list]
