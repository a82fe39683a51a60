"""Configuration models for the development environment CLI."""

from pydantic import BaseModel, Field


class ComposeConfig(BaseModel):
    """How to invoke Docker Compose."""

    command: list[str] = Field(default_factory=lambda: ["docker-compose"])
    file: str | None = None
    project_name: str | None = None


class ServicesConfig(BaseModel):
    """Container names. Compose service names are identical."""

    database: str = "astra-learn-db"
    backend: str = "astra-learn-back"
    auth: str = "fastapi-app"
    frontend: str = "astra-learn-front"


class DatabaseConfig(BaseModel):
    volume: str = "lms_intra_astra_learn_backend_postgres_data"
    user: str = "lms"
    name: str = "lms"


class AuthServiceConfig(BaseModel):
    users_url: str = "http://localhost/users/"


class FrontendConfig(BaseModel):
    """Frontend checkout and the env file written into it during init."""

    directory: str = "LMS_FRONT"
    env_file: str = ".env"
    env: dict[str, str] = Field(
        default_factory=lambda: {
            "AUTH_API_URL": "http://fastapi-app:80",
            "NEXT_PUBLIC_AUTH_API_URL": "http://localhost:8001",
        }
    )


class UrlsConfig(BaseModel):
    """Host-facing addresses printed after init, seed and status."""

    frontend: str = "http://localhost:3000"
    backend: str = "http://localhost:8000"
    auth: str = "http://localhost:8001"
    database: str = "localhost:5434"

    @property
    def admin(self) -> str:
        return f"{self.backend}/admin"

    @property
    def auth_login(self) -> str:
        return f"{self.auth}/auth/login"


class SeedAccountConfig(BaseModel):
    """Privileged account created by seed-all in both backend and auth service."""

    email: str = "admin@um6p.ma"
    username: str = "admin"
    first_name: str = "Admin"
    last_name: str = "User"
    password: str = "Password123"
    role: str = "SuperUser"


class TimingConfig(BaseModel):
    """Fixed waits, in seconds. There is no health polling."""

    readiness_delay: float = 10
    startup_delay: float = 5


class ConfigData(BaseModel):
    project_name: str = "LMS_INTRA"
    compose: ComposeConfig = Field(default_factory=ComposeConfig)
    services: ServicesConfig = Field(default_factory=ServicesConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    auth_service: AuthServiceConfig = Field(default_factory=AuthServiceConfig)
    frontend: FrontendConfig = Field(default_factory=FrontendConfig)
    urls: UrlsConfig = Field(default_factory=UrlsConfig)
    seed: SeedAccountConfig = Field(default_factory=SeedAccountConfig)
    timing: TimingConfig = Field(default_factory=TimingConfig)
