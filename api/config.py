"""Server configuration.

Settings come from environment variables, optionally loaded from a ``.env``
file in the working directory.

Environment Variables:
    TERMWEB_HOST - Interface to bind (default: 0.0.0.0)
    TERMWEB_PORT - Port to listen on (default: 3000)
    TERMWEB_LOG_LEVEL - Logging level name (default: INFO)
    TERMWEB_CORS_ORIGINS - Comma-separated allowed origins (default: *)
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ServerSettings(BaseModel):
    """Runtime settings for the termweb server.

    Args:
        host: Interface the server binds to.
        port: TCP port the server listens on.
        log_level: Root logging level.
        cors_origins: Origins allowed to call the API from a browser.
    """

    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=3000, ge=1, le=65535, description="Port to listen on")
    log_level: LogLevel = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"], description="Allowed CORS origins"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: str | list[str]) -> list[str]:
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            origins = [origin.strip() for origin in v.split(",") if origin.strip()]
            return origins or ["*"]
        return v

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "ServerSettings":
        """Build settings from the process environment.

        Args:
            load_dotenv_file: Whether to load a ``.env`` file first. Variables
                already set in the environment take precedence.

        Returns:
            The validated settings.

        Raises:
            ValidationError: If a variable holds an invalid value.
        """
        if load_dotenv_file:
            load_dotenv()

        data = {}
        env_map = {
            "host": "TERMWEB_HOST",
            "port": "TERMWEB_PORT",
            "log_level": "TERMWEB_LOG_LEVEL",
            "cors_origins": "TERMWEB_CORS_ORIGINS",
        }
        for field_name, env_name in env_map.items():
            value = os.environ.get(env_name)
            if value is not None:
                data[field_name] = value

        return cls(**data)
