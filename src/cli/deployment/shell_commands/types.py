"""Data types for shell command results."""

from __future__ import annotations

from dataclasses import dataclass

from src.cli.deployment.errors import CommandFailedError

__all__ = ["CommandResult"]


@dataclass
class CommandResult:
    """Outcome of an external command.

    Attributes:
        success: Whether the command exited with status 0
        stdout: Captured standard output (empty when not captured)
        stderr: Captured standard error (empty when not captured or merged)
        returncode: Process exit status
    """

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, in that order."""
        return self.stdout + self.stderr

    def raise_for_status(self, step: str) -> CommandResult:
        """Raise CommandFailedError if the command failed.

        Args:
            step: Human readable name of the step, used in the error message

        Returns:
            The same result, for chaining
        """
        if not self.success:
            raise CommandFailedError(step, self.returncode)
        return self
