"""Docker command abstractions.

This module provides commands for talking to the Docker engine directly:
probing the daemon, executing commands inside running containers and
removing named volumes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from src.cli.deployment.errors import ToolNotFoundError

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class DockerCommands:
    """Docker-related shell commands.

    Provides operations for:
    - Engine reachability checks
    - ``docker exec`` into named containers (interactive or piped)
    - Volume removal
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize Docker commands.

        Args:
            runner: Command runner for executing shell commands
        """
        self._runner = runner

    # =========================================================================
    # Engine
    # =========================================================================

    def is_daemon_running(self) -> bool:
        """Check whether the Docker engine answers ``docker info``.

        Returns:
            True if the engine is reachable, False otherwise
        """
        try:
            result = self._runner.run(["docker", "info"], capture_output=True)
        except ToolNotFoundError:
            return False
        return result.success

    # =========================================================================
    # Container exec
    # =========================================================================

    def exec(
        self,
        container: str,
        command: Sequence[str],
        *,
        interactive: bool = False,
        tty: bool = False,
        input: str | None = None,
        capture_output: bool = False,
        merge_stderr: bool = False,
    ) -> CommandResult:
        """Run a command inside a running container.

        Args:
            container: Container name (e.g., "astra-learn-back")
            command: Command and arguments to run in the container
            interactive: Keep stdin open (``-i``)
            tty: Allocate a pseudo-TTY (``-t``)
            input: Text piped to the command's stdin (implies ``-i``)
            capture_output: Whether to capture the command's output
            merge_stderr: When capturing, fold stderr into stdout

        Returns:
            CommandResult with exec status

        Example:
            >>> docker.exec("astra-learn-db", ["psql", "-U", "lms"], interactive=True, tty=True)
        """
        cmd = ["docker", "exec"]
        if interactive or input is not None:
            cmd.append("-i")
        if tty:
            cmd.append("-t")
        cmd.append(container)
        cmd.extend(command)
        return self._runner.run(
            cmd,
            capture_output=capture_output,
            merge_stderr=merge_stderr,
            input=input,
        )

    def exec_interactive(
        self, container: str, command: Sequence[str]
    ) -> CommandResult:
        """Run a command inside a container attached to the terminal (``-it``)."""
        return self.exec(container, command, interactive=True, tty=True)

    # =========================================================================
    # Volumes
    # =========================================================================

    def volume_rm(self, volume: str) -> CommandResult:
        """Remove a named Docker volume.

        Args:
            volume: Volume name

        Returns:
            CommandResult with removal status
        """
        return self._runner.run(["docker", "volume", "rm", volume])
