"""npm command abstractions for the frontend checkout."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class NpmCommands:
    """npm operations run on the host inside the frontend directory."""

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def install(self, cwd: Path, *, legacy_peer_deps: bool = True) -> CommandResult:
        """Install frontend dependencies.

        Args:
            cwd: Frontend directory containing package.json
            legacy_peer_deps: Relax peer dependency resolution

        Returns:
            CommandResult with install status
        """
        cmd = ["npm", "install"]
        if legacy_peer_deps:
            cmd.append("--legacy-peer-deps")
        return self._runner.run(cmd, cwd=cwd)
