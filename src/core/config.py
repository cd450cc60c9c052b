"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the CLI.
- The CI runner's own variables (`GITHUB_REF`, `GITHUB_RUN_NUMBER`,
  `GITHUB_ENV`) are accepted as fallbacks so the tool works unconfigured
  inside a workflow step.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) keeps the Core free of parsing.
    - A single configuration contract for the CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="BUILD_IDENTITY_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    ref: str | None = Field(
        default=None,
        validation_alias=AliasChoices("BUILD_IDENTITY_REF", "GITHUB_REF"),
        description="Ref of the triggering event (refs/heads/... or refs/tags/...).",
    )
    run_number: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("BUILD_IDENTITY_RUN_NUMBER", "GITHUB_RUN_NUMBER"),
        description="Monotonic CI run counter used by snapshot builds.",
    )
    github_env: Path | None = Field(
        default=None,
        validation_alias=AliasChoices("BUILD_IDENTITY_GITHUB_ENV", "GITHUB_ENV"),
        description="CI environment file receiving APP_VERSION/TAG/BUILD.",
    )
    manifest_path: Path = Field(
        default=Path("Cargo.toml"),
        description="Project manifest declaring `version = \"X.Y.Z\"`.",
    )
    artifact_basename: str = Field(
        default="libssi_man",
        min_length=1,
        description="Base name of the packaged tarball.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level
