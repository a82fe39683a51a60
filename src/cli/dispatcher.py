"""Command table and dispatch.

Every command name is a member of ``Command``; ``HANDLERS`` maps each member
except ``help`` to exactly one handler. Adding a command means adding one
member, one ``HANDLERS`` entry and one catalogue line.
"""

from collections.abc import Callable
from enum import Enum

from loguru import logger
from rich.markup import escape

from src.cli.commands import auth, backend, database, frontend, setup, utility
from src.cli.context import CLIContext, build_cli_context
from src.cli.deployment.errors import EngineUnavailableError
from src.cli.shared.console import CLIConsole, console, with_error_handling

Handler = Callable[[CLIContext], int]

HELP_ALIASES = frozenset({"help", "--help", "-h", ""})


class Command(str, Enum):
    # Setup
    INIT = "init"
    BUILD = "build"
    UP = "up"
    DOWN = "down"
    RESTART = "restart"
    CLEAN = "clean"
    # Database
    MIGRATE = "migrate"
    MAKEMIGRATIONS = "makemigrations"
    CREATESUPERUSER = "createsuperuser"
    SEED_ALL = "seed-all"
    DB_SUMMARY = "db-summary"
    DBSHELL = "dbshell"
    RESETDB = "resetdb"
    # Backend
    SHELL = "shell"
    BASH = "bash"
    LOGS = "logs"
    TEST = "test"
    # Global auth
    AUTH_LOGS = "auth-logs"
    AUTH_BASH = "auth-bash"
    CREATE_USER = "create-user"
    # Frontend
    FRONT_LOGS = "front-logs"
    FRONT_BASH = "front-bash"
    # Utility
    PS = "ps"
    STATUS = "status"
    LOGS_ALL = "logs-all"
    HELP = "help"


def parse_command(name: str) -> Command | None:
    """Return the Command named ``name``, or None for an unknown name."""
    try:
        return Command(name)
    except ValueError:
        return None


CATALOGUE: tuple[tuple[str, tuple[tuple[Command, str], ...]], ...] = (
    (
        "Setup Commands",
        (
            (Command.INIT, "Initialize project (build, migrate, create superuser)"),
            (Command.BUILD, "Build all Docker containers"),
            (Command.UP, "Start all containers"),
            (Command.DOWN, "Stop all containers"),
            (Command.RESTART, "Restart all containers"),
            (Command.CLEAN, "Stop containers and remove volumes (WARNING: deletes data)"),
        ),
    ),
    (
        "Database Commands",
        (
            (Command.MIGRATE, "Run Django migrations"),
            (Command.MAKEMIGRATIONS, "Create new migrations"),
            (Command.CREATESUPERUSER, "Create Django superuser"),
            (Command.SEED_ALL, "Create superuser + seed all demo data"),
            (Command.DB_SUMMARY, "Show database statistics and courses"),
            (Command.DBSHELL, "Open database shell"),
            (Command.RESETDB, "Reset database (WARNING: deletes all data)"),
        ),
    ),
    (
        "Backend Commands",
        (
            (Command.SHELL, "Open Django shell"),
            (Command.BASH, "Open bash in backend container"),
            (Command.LOGS, "Show backend logs"),
            (Command.TEST, "Run backend tests"),
        ),
    ),
    (
        "Global Auth Commands",
        (
            (Command.AUTH_LOGS, "Show GLOBAL-AUTH logs"),
            (Command.AUTH_BASH, "Open bash in GLOBAL-AUTH container"),
            (Command.CREATE_USER, "Create a test user in GLOBAL-AUTH"),
        ),
    ),
    (
        "Frontend Commands",
        (
            (Command.FRONT_LOGS, "Show frontend logs"),
            (Command.FRONT_BASH, "Open bash in frontend container"),
        ),
    ),
    (
        "Utility Commands",
        (
            (Command.PS, "Show running containers"),
            (Command.STATUS, "Show detailed status of all services"),
            (Command.LOGS_ALL, "Show logs from all containers"),
            (Command.HELP, "Show this help message"),
        ),
    ),
)


def show_help(out: CLIConsole) -> None:
    """Print the full command catalogue."""
    out.print_header("LMS Docker Management Script")
    out.print()
    out.line("Usage: lms-dev [command]")
    out.print()
    for title, entries in CATALOGUE:
        out.print(f"[bold]{escape(title)}:[/bold]")
        for command, description in entries:
            out.line(f"  {command.value:<17} - {description}")
        out.print()


# help is answered by dispatch() before the Docker probe, so it has no handler.
HANDLERS: dict[Command, Handler] = {
    Command.INIT: setup.init_project,
    Command.BUILD: setup.build_containers,
    Command.UP: setup.start_containers,
    Command.DOWN: setup.stop_containers,
    Command.RESTART: setup.restart_containers,
    Command.CLEAN: setup.clean_all,
    Command.MIGRATE: database.run_migrations,
    Command.MAKEMIGRATIONS: database.make_migrations,
    Command.CREATESUPERUSER: database.create_superuser,
    Command.SEED_ALL: database.seed_all,
    Command.DB_SUMMARY: database.db_summary,
    Command.DBSHELL: database.db_shell,
    Command.RESETDB: database.reset_db,
    Command.SHELL: backend.django_shell,
    Command.BASH: backend.backend_bash,
    Command.LOGS: backend.backend_logs,
    Command.TEST: backend.run_tests,
    Command.AUTH_LOGS: auth.auth_logs,
    Command.AUTH_BASH: auth.auth_bash,
    Command.CREATE_USER: auth.create_test_user,
    Command.FRONT_LOGS: frontend.frontend_logs,
    Command.FRONT_BASH: frontend.frontend_bash,
    Command.PS: utility.show_containers,
    Command.STATUS: utility.show_status,
    Command.LOGS_ALL: utility.show_all_logs,
}


@with_error_handling
def dispatch(
    name: str | None,
    *,
    context_factory: Callable[[], CLIContext] | None = None,
    out: CLIConsole = console,
) -> int:
    """Run the handler for ``name`` and return its exit status.

    Help and unknown names are answered without touching Docker. Any other
    command first checks that the Docker engine is reachable.

    Raises:
        EngineUnavailableError: If ``docker info`` fails
    """
    if name is None or name in HELP_ALIASES:
        show_help(out)
        return 0

    command = parse_command(name)
    if command is None:
        out.error(f"Unknown command: {name}")
        out.print()
        show_help(out)
        return 1

    ctx = (context_factory or build_cli_context)()
    if not ctx.commands.docker.is_daemon_running():
        raise EngineUnavailableError()

    logger.debug(f"Dispatching {command.value}")
    return HANDLERS[command](ctx)
