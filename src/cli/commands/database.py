"""Database commands.

migrate, makemigrations, createsuperuser, seed-all, db-summary, dbshell and
resetdb. Everything except the volume removal goes through the backend or
database containers.
"""

from loguru import logger

from src.cli.context import CLIContext
from src.cli.deployment.shell_commands import (
    AuthResponseOutcome,
    AuthUserPayload,
    classify_auth_response,
)

from .django_scripts import DB_SUMMARY_SCRIPT, seed_superuser_script
from .shared import wait_for_services

# Demo-data commands, tried in order; the first one the backend advertises wins.
DEMO_SEED_COMMANDS: tuple[str, ...] = ("seed_demo_data", "seed_demo")
COURSE_SEED_COMMAND = "seed_micro"


def run_migrations(ctx: CLIContext) -> int:
    ctx.console.print_header("Running Migrations")
    ctx.commands.django.migrate().raise_for_status("Migrations")
    ctx.console.ok("Migrations completed")
    return 0


def make_migrations(ctx: CLIContext) -> int:
    ctx.console.print_header("Creating Migrations")
    ctx.commands.django.makemigrations().raise_for_status("makemigrations")
    ctx.console.ok("Migrations created")
    return 0


def create_superuser(ctx: CLIContext) -> int:
    ctx.console.print_header("Creating Superuser")
    return ctx.commands.django.createsuperuser().returncode


def _seed_auth_user(ctx: CLIContext) -> AuthResponseOutcome:
    account = ctx.config.seed
    payload = AuthUserPayload(
        email=account.email,
        username=account.username,
        first_name=account.first_name,
        last_name=account.last_name,
        password=account.password,
        role=account.role,
    )
    result = ctx.commands.auth.create_user(payload)
    outcome = classify_auth_response(result.output)
    logger.debug(f"Auth service seed response classified as {outcome.value}")

    if outcome is AuthResponseOutcome.CREATED:
        ctx.console.ok(f"GLOBAL-AUTH user created: {account.email} / {account.password}")
    elif outcome is AuthResponseOutcome.ALREADY_EXISTS:
        ctx.console.ok("GLOBAL-AUTH user already exists")
    else:
        ctx.console.warn("Could not verify GLOBAL-AUTH user creation")
    return outcome


def _seed_demo_data(ctx: CLIContext) -> list[str]:
    """Run whichever optional seed commands the backend advertises.

    Returns:
        Names of the seed commands that were run
    """
    django = ctx.commands.django
    ctx.console.info("Checking for seed commands...")
    catalogue = django.help_listing()
    ran: list[str] = []

    demo_command = next((name for name in DEMO_SEED_COMMANDS if name in catalogue), None)
    if demo_command:
        ctx.console.info(f"Running {demo_command}...")
        django.run_command(demo_command).raise_for_status(demo_command)
        ctx.console.ok("Demo data seeded")
        ran.append(demo_command)
    else:
        ctx.console.warn("No seed_demo_data command found, skipping")

    if COURSE_SEED_COMMAND in catalogue:
        ctx.console.info(f"Running {COURSE_SEED_COMMAND} (ECON101 course)...")
        django.run_command(COURSE_SEED_COMMAND).raise_for_status(COURSE_SEED_COMMAND)
        ctx.console.ok("Microeconomics course seeded")
        ran.append(COURSE_SEED_COMMAND)

    return ran


def seed_all(ctx: CLIContext) -> int:
    """Create the seed superuser in both systems and load optional demo data.

    Safe to run repeatedly: the backend script checks for the username first
    and the auth service's duplicate response counts as success.
    """
    console = ctx.console
    account = ctx.config.seed
    console.print_header("Seeding Database")

    console.info(f"Creating superuser ({account.email})...")
    ctx.commands.django.run_script(seed_superuser_script(account)).raise_for_status(
        "Superuser seed"
    )

    console.info("Creating user in GLOBAL-AUTH...")
    _seed_auth_user(ctx)

    _seed_demo_data(ctx)

    console.ok("Database seeding completed!")
    console.print()
    console.info("Login credentials:")
    console.line(f"  Email:    {account.email}")
    console.line(f"  Password: {account.password}")
    console.print()
    console.info("You can now:")
    console.line(f"  - Login to GLOBAL-AUTH: {ctx.config.urls.auth_login}")
    console.line(f"  - Access Django Admin: {ctx.config.urls.admin}")
    console.line(f"  - Use the frontend: {ctx.config.urls.frontend}")
    return 0


def db_summary(ctx: CLIContext) -> int:
    ctx.console.print_header("Database Summary")
    return ctx.commands.django.run_script(DB_SUMMARY_SCRIPT).returncode


def db_shell(ctx: CLIContext) -> int:
    ctx.console.print_header("Opening Database Shell")
    database = ctx.config.database
    return ctx.commands.docker.exec_interactive(
        ctx.config.services.database,
        ["psql", "-U", database.user, "-d", database.name],
    ).returncode


def reset_db(ctx: CLIContext) -> int:
    """Drop the database volume and re-run migrations after an explicit ``yes``."""
    console = ctx.console
    commands = ctx.commands
    if not console.confirm_action("This will delete all data in the database"):
        console.info("Database reset cancelled")
        return 0

    console.print_header("Resetting Database")
    commands.compose.down().raise_for_status("Stop")
    commands.docker.volume_rm(ctx.config.database.volume).raise_for_status(
        "Volume removal"
    )
    commands.compose.up().raise_for_status("Start")
    wait_for_services(ctx.config.timing.readiness_delay)
    commands.django.migrate().raise_for_status("Migrations")
    console.ok("Database reset completed")
    console.info("Don't forget to create a new superuser!")
    return 0
