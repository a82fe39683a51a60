"""Backend commands: shell, bash, logs, test."""

from src.cli.context import CLIContext


def django_shell(ctx: CLIContext) -> int:
    ctx.console.print_header("Opening Django Shell")
    return ctx.commands.django.shell().returncode


def backend_bash(ctx: CLIContext) -> int:
    ctx.console.print_header("Opening Backend Bash")
    return ctx.commands.docker.exec_interactive(
        ctx.config.services.backend, ["bash"]
    ).returncode


def backend_logs(ctx: CLIContext) -> int:
    ctx.console.print_header("Backend Logs (Ctrl+C to exit)")
    return ctx.commands.compose.logs(
        service=ctx.config.services.backend, follow=True
    ).returncode


def run_tests(ctx: CLIContext) -> int:
    ctx.console.print_header("Running Backend Tests")
    return ctx.commands.django.test().returncode
