"""Setup commands: init, build, up, down, restart, clean."""

from src.cli.context import CLIContext
from src.cli.deployment.errors import DevEnvError

from .shared import print_service_urls, wait_for_services


def init_project(ctx: CLIContext) -> int:
    """Build, start, migrate, create a superuser and prepare the frontend."""
    console = ctx.console
    commands = ctx.commands
    console.print_header("Initializing LMS Project")

    console.info("Building containers...")
    commands.compose.build().raise_for_status("Build")

    console.info("Starting containers...")
    commands.compose.up().raise_for_status("Start")

    console.info("Waiting for services to be ready...")
    wait_for_services(ctx.config.timing.readiness_delay)

    console.info("Running migrations...")
    commands.django.migrate().raise_for_status("Migrations")

    console.info("Creating superuser...")
    commands.django.createsuperuser().raise_for_status("Superuser creation")

    frontend = ctx.config.frontend
    frontend_dir = ctx.project_root / frontend.directory
    console.info(f"Setting up frontend ({frontend.directory})...")
    if not frontend_dir.is_dir():
        raise DevEnvError(
            f"Frontend directory not found: {frontend_dir}",
            "Check out the frontend sub-repository (git submodule update --init).",
        )

    console.info("Running npm install (with legacy peer deps)...")
    commands.npm.install(frontend_dir).raise_for_status("npm install")
    console.ok("npm install completed.")

    console.info("Creating .env file for frontend...")
    env_path = frontend_dir / frontend.env_file
    env_path.write_text("".join(f"{key}={value}\n" for key, value in frontend.env.items()))
    console.ok(f".env file created in {frontend.directory}/{frontend.env_file}.")

    console.ok("Project initialized successfully!")
    console.info("Access the services at:")
    print_service_urls(ctx)
    return 0


def build_containers(ctx: CLIContext) -> int:
    ctx.console.print_header("Building Docker Containers")
    ctx.commands.compose.build().raise_for_status("Build")
    ctx.console.ok("Build completed")
    return 0


def start_containers(ctx: CLIContext) -> int:
    ctx.console.print_header("Starting Containers")
    ctx.commands.compose.up().raise_for_status("Start")
    ctx.console.ok("Containers started")
    wait_for_services(ctx.config.timing.startup_delay)
    return ctx.commands.compose.ps().returncode


def stop_containers(ctx: CLIContext) -> int:
    ctx.console.print_header("Stopping Containers")
    ctx.commands.compose.down().raise_for_status("Stop")
    ctx.console.ok("Containers stopped")
    return 0


def restart_containers(ctx: CLIContext) -> int:
    ctx.console.print_header("Restarting Containers")
    ctx.commands.compose.restart().raise_for_status("Restart")
    ctx.console.ok("Containers restarted")
    return 0


def clean_all(ctx: CLIContext) -> int:
    """Stop containers and remove volumes after an explicit ``yes``."""
    if not ctx.console.confirm_action(
        "This will remove all containers and volumes (all data will be lost)"
    ):
        ctx.console.info("Cleanup cancelled")
        return 0

    ctx.console.print_header("Cleaning Project")
    ctx.commands.compose.down(volumes=True).raise_for_status("Cleanup")
    ctx.console.ok("Cleanup completed")
    return 0
