"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `KOBO_HIGHLIGHTS_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kobo_highlights.core.hierarchy import HierarchyStrategy


class Settings(BaseSettings):
    """Exporter settings.

    All fields are environment-configurable. Prefix is `KOBO_HIGHLIGHTS_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="KOBO_HIGHLIGHTS_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    log_level: str = Field(default="INFO")

    # Hierarchy inference; picked per deployment, never auto-detected
    hierarchy_strategy: HierarchyStrategy = Field(default=HierarchyStrategy.DEPTH_SUFFIX)

    # Output
    output_dir: Path = Field(default=Path("highlights"))
    file_extension: str = Field(default=".md")
    skip_empty_books: bool = Field(default=True)

    @field_validator("file_extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        value = value.strip()
        if value and not value.startswith("."):
            value = "." + value
        return value


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("KOBO_HIGHLIGHTS_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
