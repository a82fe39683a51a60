"""CLI context and dependency container."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from src.cli.config import CONFIG_FILENAME, ConfigData, load_config
from src.cli.deployment.errors import DevEnvError
from src.cli.deployment.shell_commands import ShellCommands
from src.cli.shared.console import CLIConsole, console
from src.utils.paths import get_project_root


@dataclass(frozen=True)
class CLIContext:
    """Runtime dependencies for CLI commands."""

    console: CLIConsole
    project_root: Path
    commands: ShellCommands
    config: ConfigData


def build_cli_context(project_root: Path | None = None) -> CLIContext:
    """Build a fresh CLIContext.

    Loads the project ``.env`` (without overriding the environment) so that
    ``config.yaml`` substitutions can use it, then validates the config.

    Raises:
        DevEnvError: If config.yaml is invalid
    """
    project_root = project_root or get_project_root()
    load_dotenv(project_root / ".env", override=False)

    try:
        config = load_config(project_root / CONFIG_FILENAME)
    except ValueError as e:
        raise DevEnvError("Invalid configuration", str(e)) from e

    return CLIContext(
        console=console,
        project_root=project_root,
        commands=ShellCommands(project_root, config),
        config=config,
    )
