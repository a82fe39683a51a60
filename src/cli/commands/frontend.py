"""Frontend commands: front-logs, front-bash."""

from src.cli.context import CLIContext


def frontend_logs(ctx: CLIContext) -> int:
    ctx.console.print_header("Frontend Logs (Ctrl+C to exit)")
    return ctx.commands.compose.logs(
        service=ctx.config.services.frontend, follow=True
    ).returncode


def frontend_bash(ctx: CLIContext) -> int:
    ctx.console.print_header("Opening Frontend Bash")
    return ctx.commands.docker.exec_interactive(
        ctx.config.services.frontend, ["bash"]
    ).returncode
