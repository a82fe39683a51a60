"""GLOBAL-AUTH user-creation endpoint.

The auth service only listens on the compose network, so requests are sent
with ``curl`` from inside its own container.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel

from .types import CommandResult

if TYPE_CHECKING:
    from .docker import DockerCommands

DEFAULT_ROLE = "Student"
ROLES: tuple[str, ...] = ("Student", "Staff", "Professor", "Admin", "SuperUser")


class AuthUserPayload(BaseModel):
    """JSON body accepted by ``POST /users/``."""

    email: str
    username: str
    first_name: str
    last_name: str
    password: str
    role: str = DEFAULT_ROLE


class AuthResponseOutcome(str, Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    UNVERIFIED = "unverified"


def classify_auth_response(body: str) -> AuthResponseOutcome:
    """Classify the raw response of a user-creation call.

    The service does not expose a structured duplicate status, so this looks
    for an ``"id"`` key (created) and then for the word "already" in any case
    (duplicate). Anything else cannot be verified.
    """
    if '"id"' in body:
        return AuthResponseOutcome.CREATED
    if "already" in body.lower():
        return AuthResponseOutcome.ALREADY_EXISTS
    return AuthResponseOutcome.UNVERIFIED


class AuthServiceCommands:
    """Calls against the external auth service."""

    def __init__(
        self, docker: DockerCommands, container: str, users_url: str
    ) -> None:
        """Initialize auth service commands.

        Args:
            docker: Docker commands used to exec into the container
            container: Name of the auth service container
            users_url: User-creation URL as seen from inside the container
        """
        self._docker = docker
        self.container = container
        self.users_url = users_url

    def create_user(self, payload: AuthUserPayload) -> CommandResult:
        """POST a new user and capture the raw response.

        Args:
            payload: The six user fields

        Returns:
            CommandResult whose ``output`` holds the response body (and any
            curl diagnostics)
        """
        return self._docker.exec(
            self.container,
            [
                "curl",
                "-s",
                "-X",
                "POST",
                self.users_url,
                "-H",
                "Content-Type: application/json",
                "-d",
                payload.model_dump_json(),
            ],
            interactive=True,
            capture_output=True,
            merge_stderr=True,
        )
