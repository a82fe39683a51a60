"""Command runner for executing shell commands.

This module provides the base command execution functionality used by
all specialized command modules.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from loguru import logger

from src.cli.deployment.errors import ToolNotFoundError

from .types import CommandResult


class CommandRunner:
    """Low-level command executor with consistent result handling.

    All specialized command modules (Docker, Compose, Django, npm, ...) use
    this runner for actual command execution, so tests only need to patch
    ``subprocess.run`` or swap the runner.
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize the command runner.

        Args:
            project_root: Path to the project root directory.
                         Commands will be executed from this directory by default.
        """
        self.project_root = project_root

    def run(
        self,
        cmd: Sequence[str],
        *,
        cwd: Path | None = None,
        capture_output: bool = False,
        merge_stderr: bool = False,
        input: str | None = None,
    ) -> CommandResult:
        """Execute a command and return a structured result.

        Output is streamed straight to the terminal unless ``capture_output``
        is set, so interactive tools (shells, psql, prompts) keep their TTY.

        Args:
            cmd: Command and arguments as a sequence
            cwd: Working directory (defaults to project_root)
            capture_output: Whether to capture stdout/stderr
            merge_stderr: When capturing, fold stderr into stdout (``2>&1``)
            input: Text fed to the command's standard input

        Returns:
            CommandResult with success status, output, and return code

        Raises:
            ToolNotFoundError: If the program is not installed
        """
        args = list(cmd)
        logger.debug(f"Running: {shlex.join(args)}")

        streams: dict[str, Any]
        if capture_output and merge_stderr:
            streams = {"stdout": subprocess.PIPE, "stderr": subprocess.STDOUT}
        else:
            streams = {"capture_output": capture_output}

        try:
            result = subprocess.run(
                args,
                cwd=cwd or self.project_root,
                input=input,
                text=True,
                **streams,
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError(args[0]) from e

        if result.returncode != 0:
            logger.debug(f"Command exited with {result.returncode}: {args[0]}")

        return CommandResult(
            success=result.returncode == 0,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            returncode=result.returncode,
        )
