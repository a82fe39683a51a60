"""Tests for command parsing and dispatch."""

import io
import subprocess
from unittest.mock import Mock, patch

import pytest
import typer
from rich.console import Console
from typer.testing import CliRunner

from src.cli import app
from src.cli.config import ConfigData
from src.cli.context import CLIContext
from src.cli.deployment.errors import DevEnvError
from src.cli.deployment.shell_commands import ShellCommands
from src.cli.dispatcher import (
    CATALOGUE,
    HANDLERS,
    HELP_ALIASES,
    Command,
    dispatch,
    parse_command,
)
from src.cli.shared.console import CLIConsole, console

runner = CliRunner()


def test_every_command_but_help_has_a_handler():
    assert set(HANDLERS) == set(Command) - {Command.HELP}


def test_every_command_is_in_the_catalogue():
    listed = [command for _, entries in CATALOGUE for command, _ in entries]

    assert sorted(listed) == sorted(Command)
    assert len(listed) == len(set(listed))


def test_command_set_matches_cli_surface():
    assert {c.value for c in Command} == {
        "init", "build", "up", "down", "restart", "clean",
        "migrate", "makemigrations", "createsuperuser", "seed-all",
        "db-summary", "dbshell", "resetdb",
        "shell", "bash", "logs", "test",
        "auth-logs", "auth-bash", "create-user",
        "front-logs", "front-bash",
        "ps", "status", "logs-all", "help",
    }  # fmt: skip


@pytest.mark.parametrize("name", ["seed-all", "status", "front-bash"])
def test_parse_known_command(name):
    assert parse_command(name) is Command(name)


@pytest.mark.parametrize("name", ["seed", "STATUS", "docker", " ps"])
def test_parse_unknown_command(name):
    assert parse_command(name) is None


class TestDispatch:
    @pytest.mark.parametrize("name", [None, *sorted(HELP_ALIASES)])
    def test_help_makes_no_external_calls(self, name):
        factory = Mock()
        out = Mock()

        assert dispatch(name, context_factory=factory, out=out) == 0

        factory.assert_not_called()
        out.print_header.assert_called_once_with("LMS Docker Management Script")

    def test_unknown_command_prints_catalogue_and_fails(self):
        factory = Mock()
        out = Mock()

        assert dispatch("bogus", context_factory=factory, out=out) == 1

        factory.assert_not_called()
        out.error.assert_called_once_with("Unknown command: bogus")
        out.print_header.assert_called_once()

    def test_engine_unreachable_aborts_before_handler(self, cli_ctx, mock_commands):
        mock_commands.docker.is_daemon_running.return_value = False

        with pytest.raises(typer.Exit) as excinfo:
            dispatch("build", context_factory=lambda: cli_ctx)

        assert excinfo.value.exit_code == 1
        mock_commands.compose.build.assert_not_called()

    def test_runs_exactly_one_handler(self, cli_ctx, mock_commands):
        handler = Mock(return_value=0)

        with patch.dict(HANDLERS, {Command.PS: handler}):
            assert dispatch("ps", context_factory=lambda: cli_ctx) == 0

        handler.assert_called_once_with(cli_ctx)
        mock_commands.docker.is_daemon_running.assert_called_once_with()

    def test_handler_status_is_returned(self, cli_ctx):
        with patch.dict(HANDLERS, {Command.TEST: Mock(return_value=3)}):
            assert dispatch("test", context_factory=lambda: cli_ctx) == 3

    def test_declined_clean_exits_zero(self, cli_ctx, mock_commands, mock_console):
        mock_console.confirm_action.return_value = False

        assert dispatch("clean", context_factory=lambda: cli_ctx) == 0

        mock_commands.compose.down.assert_not_called()

    def test_errors_are_reported_on_the_given_console(self):
        buffer = io.StringIO()
        out = CLIConsole(Console(file=buffer, width=120))

        def _broken_context() -> CLIContext:
            raise DevEnvError("Invalid configuration", "bad timing value")

        with pytest.raises(typer.Exit) as excinfo:
            dispatch("build", context_factory=_broken_context, out=out)

        assert excinfo.value.exit_code == 1
        assert "Invalid configuration" in buffer.getvalue()
        assert "bad timing value" in buffer.getvalue()


class TestCli:
    @pytest.mark.parametrize("args", [[], ["help"], ["--help"], ["-h"]])
    def test_help_exits_zero_with_catalogue(self, args):
        with patch("src.cli.dispatcher.build_cli_context") as factory, patch(
            "subprocess.run"
        ) as mock_run:
            result = runner.invoke(app, args)

        assert result.exit_code == 0
        for command in Command:
            assert command.value in result.output
        factory.assert_not_called()
        mock_run.assert_not_called()

    def test_unknown_command_exits_one(self):
        with patch("src.cli.dispatcher.build_cli_context") as factory:
            result = runner.invoke(app, ["frobnicate"])

        assert result.exit_code == 1
        assert "Unknown command: frobnicate" in result.output
        assert "seed-all" in result.output
        factory.assert_not_called()

    def test_docker_not_running(self):
        ctx = Mock()
        ctx.commands.docker.is_daemon_running.return_value = False

        with patch("src.cli.dispatcher.build_cli_context", return_value=ctx):
            result = runner.invoke(app, ["up"])

        assert result.exit_code == 1
        assert "Docker is not running" in result.output
        ctx.commands.compose.up.assert_not_called()

    def test_status(self, cli_ctx, mock_commands):
        with patch("src.cli.dispatcher.build_cli_context", return_value=cli_ctx):
            result = runner.invoke(app, ["status"])

        assert result.exit_code == 0
        mock_commands.compose.ps.assert_called_once_with()

    def test_verbose_flag_is_accepted(self):
        result = runner.invoke(app, ["--verbose", "help"])

        assert result.exit_code == 0
        assert "Usage: lms-dev [command]" in result.output

    def test_clean_reads_confirmation_from_stdin(self, tmp_path, mock_commands):
        ctx = CLIContext(
            console=console,
            project_root=tmp_path,
            commands=mock_commands,
            config=ConfigData(),
        )

        with patch("src.cli.dispatcher.build_cli_context", return_value=ctx):
            declined = runner.invoke(app, ["clean"], input="y\n")
            confirmed = runner.invoke(app, ["clean"], input="yes\n")

        assert declined.exit_code == 0
        assert "Cleanup cancelled" in declined.output
        assert confirmed.exit_code == 0
        mock_commands.compose.down.assert_called_once_with(volumes=True)

    def test_missing_compose_binary_exits_127(self, tmp_path):
        def _run(args, **kwargs):
            if args[0] == "docker":
                return subprocess.CompletedProcess(args, 0, stdout="", stderr="")
            raise FileNotFoundError(2, "No such file or directory")

        ctx = CLIContext(
            console=console,
            project_root=tmp_path,
            commands=ShellCommands(tmp_path, ConfigData()),
            config=ConfigData(),
        )

        with patch("src.cli.dispatcher.build_cli_context", return_value=ctx), patch(
            "subprocess.run", side_effect=_run
        ):
            result = runner.invoke(app, ["ps"])

        assert result.exit_code == 127
        assert "Command not found: docker-compose" in result.output
