"""Shared helpers for lifecycle command handlers."""

import time

from src.cli.context import CLIContext


def wait_for_services(seconds: float) -> None:
    """Fixed readiness delay. No health checks are performed."""
    if seconds > 0:
        time.sleep(seconds)


def print_service_urls(ctx: CLIContext, *, include_database: bool = False) -> None:
    urls = ctx.config.urls
    if include_database:
        ctx.console.line(f"  - Frontend:     {urls.frontend}")
        ctx.console.line(f"  - Backend:      {urls.backend}")
        ctx.console.line(f"  - GLOBAL-AUTH:  {urls.auth}")
        ctx.console.line(f"  - Backend DB:   {urls.database}")
    else:
        ctx.console.line(f"  - Frontend: {urls.frontend}")
        ctx.console.line(f"  - Backend API: {urls.backend}")
        ctx.console.line(f"  - GLOBAL-AUTH: {urls.auth}")
