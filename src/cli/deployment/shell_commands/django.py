"""Django management command abstractions.

Every call is a ``docker exec`` into the backend container running
``python manage.py <command>``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .docker import DockerCommands


class DjangoCommands:
    """Backend management commands executed inside the backend container."""

    def __init__(self, docker: DockerCommands, container: str) -> None:
        """Initialize Django commands.

        Args:
            docker: Docker commands used to exec into the container
            container: Name of the backend container
        """
        self._docker = docker
        self.container = container

    def _manage(self, *args: str) -> list[str]:
        return ["python", "manage.py", *args]

    def migrate(self) -> CommandResult:
        """Apply pending migrations."""
        return self._docker.exec_interactive(self.container, self._manage("migrate"))

    def makemigrations(self) -> CommandResult:
        """Generate migration files for model changes."""
        return self._docker.exec_interactive(
            self.container, self._manage("makemigrations")
        )

    def createsuperuser(self) -> CommandResult:
        """Run the interactive superuser prompt."""
        return self._docker.exec_interactive(
            self.container, self._manage("createsuperuser")
        )

    def shell(self) -> CommandResult:
        """Open an interactive Django shell."""
        return self._docker.exec_interactive(self.container, self._manage("shell"))

    def run_script(self, script: str) -> CommandResult:
        """Pipe a Python script into ``manage.py shell``.

        Args:
            script: Python source evaluated inside the Django shell

        Returns:
            CommandResult; the script's output streams to the terminal
        """
        return self._docker.exec(self.container, self._manage("shell"), input=script)

    def help_listing(self) -> str:
        """Return the ``manage.py help`` catalogue, stderr included.

        A failing probe yields whatever the container printed (usually an
        error), so callers that grep it simply find nothing.
        """
        result = self._docker.exec(
            self.container,
            self._manage("help"),
            capture_output=True,
            merge_stderr=True,
        )
        return result.output

    def run_command(self, name: str) -> CommandResult:
        """Run a non-interactive management command (e.g. ``seed_demo_data``)."""
        return self._docker.exec(self.container, self._manage(name))

    def test(self) -> CommandResult:
        """Run the backend test suite."""
        return self._docker.exec_interactive(self.container, ["pytest"])
