"""Utility commands: ps, status, logs-all."""

from src.cli.context import CLIContext

from .shared import print_service_urls


def show_containers(ctx: CLIContext) -> int:
    return ctx.commands.compose.ps().returncode


def show_status(ctx: CLIContext) -> int:
    """List containers and the four host-facing service addresses."""
    ctx.console.print_header("Container Status")
    returncode = ctx.commands.compose.ps().returncode
    ctx.console.print()
    ctx.console.info("Service URLs:")
    print_service_urls(ctx, include_database=True)
    return returncode


def show_all_logs(ctx: CLIContext) -> int:
    ctx.console.print_header("All Container Logs (Ctrl+C to exit)")
    return ctx.commands.compose.logs(follow=True).returncode
