"""Docker Compose command helpers."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from src.cli.deployment.shell_commands.runner import CommandRunner
from src.cli.deployment.shell_commands.types import CommandResult


class ComposeRunner:
    """Wrapper for Docker Compose commands with consistent defaults."""

    def __init__(
        self,
        runner: CommandRunner,
        *,
        command: Sequence[str] = ("docker-compose",),
        compose_file: Path | None = None,
        project_name: str | None = None,
    ) -> None:
        self._runner = runner
        self._command = list(command)
        self._compose_file = compose_file
        self._project_name = project_name

    def _base_cmd(self) -> list[str]:
        cmd = list(self._command)
        if self._project_name:
            cmd.extend(["-p", self._project_name])
        if self._compose_file:
            cmd.extend(["-f", str(self._compose_file)])
        return cmd

    def run(self, args: Sequence[str]) -> CommandResult:
        return self._runner.run(self._base_cmd() + list(args))

    def build(self) -> CommandResult:
        return self.run(["build"])

    def up(self) -> CommandResult:
        """Start every service in the background."""
        return self.run(["up", "-d"])

    def down(self, *, volumes: bool = False) -> CommandResult:
        args = ["down"]
        if volumes:
            args.append("-v")
        return self.run(args)

    def restart(self) -> CommandResult:
        return self.run(["restart"])

    def ps(self) -> CommandResult:
        return self.run(["ps"])

    def logs(
        self, *, service: str | None = None, follow: bool = False
    ) -> CommandResult:
        args = ["logs"]
        if follow:
            args.append("-f")
        if service:
            args.append(service)
        return self.run(args)
