"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `OSTBUILDER_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ostbuilder.models.tree import DEFAULT_PROJECT_NAME


class Settings(BaseSettings):
    """OST Builder settings.

    All fields are environment-configurable. Prefix is `OSTBUILDER_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="OSTBUILDER_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    log_level: str = Field(default="WARNING")

    # Sharing
    share_base: str = Field(default="https://ost-builder.trinixlabs.dev/")
    default_project_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)

    # Output
    json_indent: int = Field(default=2, ge=0, le=8)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("OSTBUILDER_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
