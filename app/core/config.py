"""Site Group Manager configuration settings."""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Server configuration settings."""

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    CORS_ALLOWED_ORIGINS: str = Field(
        default="http://localhost:8000,http://127.0.0.1:8000",
        alias="CORS_ALLOWED_ORIGINS",
    )
    # Load balancer health checks hit the system routes often
    SYSTEM_RATE_LIMIT: str = Field(default="50/minute", alias="SYSTEM_RATE_LIMIT")

    @property
    def cors_origins(self) -> List[str]:
        """Comma separated CORS_ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.CORS_ALLOWED_ORIGINS.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class GroupManagerSettings(BaseSettings):
    """Configuration for the site group manager tool.

    GROUP_MANAGER_PATH is the mount point of the tool routes, the equivalent
    of the servlet context the tool is deployed under in the host.
    GROUP_MANAGER_REDIRECT_STATUS is the status used when the tool sends the
    browser back to its main page.
    """

    path: str = Field(default="/group-manager", alias="GROUP_MANAGER_PATH")
    redirect_status: int = Field(default=302, alias="GROUP_MANAGER_REDIRECT_STATUS")

    @field_validator("path", mode="after")
    @classmethod
    def _normalize_path(cls, v: str) -> str:
        v = v.strip()
        if not v or v == "/":
            return ""
        if not v.startswith("/"):
            v = "/" + v
        return v.rstrip("/")

    @field_validator("redirect_status", mode="after")
    @classmethod
    def _check_redirect_status(cls, v: int) -> int:
        if v not in (301, 302, 303, 307, 308):
            raise ValueError(f"GROUP_MANAGER_REDIRECT_STATUS must be a redirect code, got {v}")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class TermManagerSettings(BaseSettings):
    """Academic term manager settings."""

    events_enabled: bool = Field(default=True, alias="ACADTERM_EVENTS_ENABLED")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """Site Group Manager configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Server settings
    server: ServerSettings

    # Functionality settings
    group_manager: GroupManagerSettings
    acadterm: TermManagerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "server": ServerSettings,
            "group_manager": GroupManagerSettings,
            "acadterm": TermManagerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
