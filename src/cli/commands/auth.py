"""GLOBAL-AUTH commands: auth-logs, auth-bash, create-user."""

from src.cli.context import CLIContext
from src.cli.deployment.shell_commands import AuthUserPayload
from src.cli.deployment.shell_commands.auth_service import DEFAULT_ROLE, ROLES


def auth_logs(ctx: CLIContext) -> int:
    ctx.console.print_header("GLOBAL-AUTH Logs (Ctrl+C to exit)")
    return ctx.commands.compose.logs(
        service=ctx.config.services.auth, follow=True
    ).returncode


def auth_bash(ctx: CLIContext) -> int:
    ctx.console.print_header("Opening GLOBAL-AUTH Bash")
    return ctx.commands.docker.exec_interactive(
        ctx.config.services.auth, ["bash"]
    ).returncode


def prompt_user_payload(ctx: CLIContext) -> AuthUserPayload:
    """Ask for each user field in turn. A blank role means Student."""
    console = ctx.console
    email = console.prompt("Email")
    username = console.prompt("Username")
    first_name = console.prompt("First Name")
    last_name = console.prompt("Last Name")
    password = console.prompt("Password", password=True)
    role = console.prompt(
        f"Role ({'/'.join(ROLES)}) [{DEFAULT_ROLE}]", default=DEFAULT_ROLE
    )
    return AuthUserPayload(
        email=email,
        username=username,
        first_name=first_name,
        last_name=last_name,
        password=password,
        role=role,
    )


def create_test_user(ctx: CLIContext) -> int:
    """Create a user in GLOBAL-AUTH from interactively entered fields."""
    console = ctx.console
    console.print_header("Creating Test User in GLOBAL-AUTH")
    console.print()

    payload = prompt_user_payload(ctx)
    result = ctx.commands.auth.create_user(payload)
    console.line(result.output)
    result.raise_for_status("User creation request")

    console.ok("User created successfully")
    return 0
