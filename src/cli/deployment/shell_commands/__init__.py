"""Shell command abstractions for development environment operations.

This package provides a clean interface over the external tools the CLI
drives. It is organized into specialized modules for each tool:

- docker: engine probe, container exec and volume removal
- django: backend ``manage.py`` commands run inside the backend container
- auth_service: GLOBAL-AUTH user creation via its HTTP endpoint
- npm: frontend dependency installation

Docker Compose itself is wrapped by ``src.cli.shared.compose.ComposeRunner``
and exposed here as ``compose``.

Usage:
    from src.cli.deployment.shell_commands import ShellCommands

    commands = ShellCommands(project_root=Path("."), config=ConfigData())
    if commands.docker.is_daemon_running():
        commands.compose.up()
"""

from pathlib import Path

from src.cli.config import ConfigData
from src.cli.shared.compose import ComposeRunner

from .auth_service import (
    AuthResponseOutcome,
    AuthServiceCommands,
    AuthUserPayload,
    classify_auth_response,
)
from .django import DjangoCommands
from .docker import DockerCommands
from .npm import NpmCommands
from .runner import CommandRunner
from .types import CommandResult


class ShellCommands:
    """Unified interface for all shell command operations.

    Attributes:
        compose: Docker Compose commands
        docker: Docker engine and exec commands
        django: Backend management commands
        auth: Auth service commands
        npm: Frontend npm commands
    """

    def __init__(self, project_root: Path, config: ConfigData) -> None:
        """Initialize the shell commands executor.

        Args:
            project_root: Path to the project root directory.
                         Commands will be executed from this directory by default.
            config: Loaded configuration (container names, compose invocation)
        """
        self._project_root = Path(project_root)
        self._runner = CommandRunner(self._project_root)

        compose_file = (
            self._project_root / config.compose.file if config.compose.file else None
        )
        self.compose = ComposeRunner(
            self._runner,
            command=config.compose.command,
            compose_file=compose_file,
            project_name=config.compose.project_name,
        )
        self.docker = DockerCommands(self._runner)
        self.django = DjangoCommands(self.docker, config.services.backend)
        self.auth = AuthServiceCommands(
            self.docker, config.services.auth, config.auth_service.users_url
        )
        self.npm = NpmCommands(self._runner)

    @property
    def project_root(self) -> Path:
        """Get the project root path."""
        return self._project_root


__all__ = [
    "ShellCommands",
    "CommandResult",
    "CommandRunner",
    "AuthResponseOutcome",
    "AuthServiceCommands",
    "AuthUserPayload",
    "classify_auth_response",
    "DjangoCommands",
    "DockerCommands",
    "NpmCommands",
]
