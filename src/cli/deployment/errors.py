"""Exceptions raised by lifecycle operations."""


class DevEnvError(Exception):
    """Raised when a development environment operation fails."""

    def __init__(
        self, message: str, details: str | None = None, exit_code: int = 1
    ) -> None:
        self.message = message
        self.details = details
        self.exit_code = exit_code
        super().__init__(message)


class EngineUnavailableError(DevEnvError):
    """Raised when the container engine cannot be reached."""

    def __init__(self, details: str | None = None) -> None:
        super().__init__(
            "Docker is not running. Please start Docker and try again.",
            details,
        )


class CommandFailedError(DevEnvError):
    """Raised when an external tool exits with a non-zero status.

    The tool's own output has already been streamed to the terminal, so only
    the failing step is reported and the tool's exit status is propagated.
    """

    def __init__(self, step: str, returncode: int) -> None:
        self.step = step
        self.returncode = returncode
        super().__init__(
            f"{step} failed (exit code {returncode})",
            exit_code=returncode or 1,
        )


class ToolNotFoundError(DevEnvError):
    """Raised when an external program is not installed or not on PATH."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"Command not found: {tool}", exit_code=127)
