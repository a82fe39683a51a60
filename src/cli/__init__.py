"""Main CLI application module.

This module provides the entry point for ``lms-dev``, the convenience CLI
that drives the LMS INTRA local Docker environment: the PostgreSQL database,
the Django backend, the GLOBAL-AUTH service and the Next.js frontend.

Command Groups (see ``lms-dev help``):
- Setup: init, build, up, down, restart, clean
- Database: migrate, makemigrations, createsuperuser, seed-all, db-summary, dbshell, resetdb
- Backend: shell, bash, logs, test
- Global Auth: auth-logs, auth-bash, create-user
- Frontend: front-logs, front-bash
- Utility: ps, status, logs-all, help
"""

import typer

from .dispatcher import dispatch
from .shared.logging_setup import configure_logging

app = typer.Typer(add_completion=False, rich_markup_mode="rich")


# Help flags are passed through as the command so they print the catalogue
@app.command(
    context_settings={"help_option_names": [], "ignore_unknown_options": True}
)
def run(
    command: str | None = typer.Argument(
        None,
        metavar="COMMAND",
        help="Command to run. Use 'help' to list all commands.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every external command before it runs",
    ),
) -> None:
    """🛠️  LMS INTRA Docker management CLI."""
    configure_logging(verbose)
    raise typer.Exit(dispatch(command))


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
