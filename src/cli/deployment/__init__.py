"""External tool integration for the development environment.

- errors: exceptions raised by lifecycle operations
- shell_commands: wrappers over docker, docker compose, Django, npm and the
  GLOBAL-AUTH endpoint
"""

from .errors import (
    CommandFailedError,
    DevEnvError,
    EngineUnavailableError,
    ToolNotFoundError,
)

__all__ = [
    "DevEnvError",
    "EngineUnavailableError",
    "CommandFailedError",
    "ToolNotFoundError",
]
