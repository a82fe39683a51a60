"""Shared fixtures: a CLIContext whose every external command is mocked."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from src.cli.config import ConfigData
from src.cli.context import CLIContext
from src.cli.shared.console import CLIConsole
from tests.helpers import ok_result


@pytest.fixture
def mock_commands():
    """ShellCommands stand-in where every call succeeds."""
    commands = Mock()
    commands.docker.is_daemon_running.return_value = True
    commands.docker.exec.return_value = ok_result()
    commands.docker.exec_interactive.return_value = ok_result()
    commands.docker.volume_rm.return_value = ok_result()
    for name in ("build", "up", "down", "restart", "ps", "logs"):
        getattr(commands.compose, name).return_value = ok_result()
    for name in (
        "migrate",
        "makemigrations",
        "createsuperuser",
        "shell",
        "run_script",
        "run_command",
        "test",
    ):
        getattr(commands.django, name).return_value = ok_result()
    commands.django.help_listing.return_value = ""
    commands.auth.create_user.return_value = ok_result('{"id": 1}')
    commands.npm.install.return_value = ok_result()
    return commands


@pytest.fixture
def mock_console():
    """Console stand-in recording every call."""
    return Mock(spec=CLIConsole)


@pytest.fixture
def cli_ctx(tmp_path: Path, mock_commands, mock_console) -> CLIContext:
    return CLIContext(
        console=mock_console,
        project_root=tmp_path,
        commands=mock_commands,
        config=ConfigData(),
    )


@pytest.fixture
def no_sleep():
    """Skip the fixed readiness waits."""
    with patch("src.cli.commands.shared.time.sleep") as mock_sleep:
        yield mock_sleep
