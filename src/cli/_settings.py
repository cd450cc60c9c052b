"""Settings loading shared by every command."""

from __future__ import annotations

import typer
from pydantic import ValidationError

from core.config import AppSettings


def load_settings() -> AppSettings:
    """Load `AppSettings`; invalid environment values are a usage error (exit 2)."""

    try:
        return AppSettings()
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid configuration in environment:\n{exc}") from exc
