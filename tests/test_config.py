from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings


def test_defaults() -> None:
    settings = AppSettings()
    assert settings.ref is None
    assert settings.run_number is None
    assert settings.manifest_path == Path("Cargo.toml")
    assert settings.artifact_basename == "libssi_man"
    assert settings.log_level == "WARNING"


def test_reads_ci_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_REF", "refs/heads/main")
    monkeypatch.setenv("GITHUB_RUN_NUMBER", "42")
    monkeypatch.setenv("GITHUB_ENV", "/tmp/github_env")
    settings = AppSettings()
    assert settings.ref == "refs/heads/main"
    assert settings.run_number == 42
    assert settings.github_env == Path("/tmp/github_env")


def test_prefixed_variables_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_REF", "refs/heads/main")
    monkeypatch.setenv("BUILD_IDENTITY_REF", "refs/tags/v1.0.0-build1")
    assert AppSettings().ref == "refs/tags/v1.0.0-build1"


def test_negative_run_number_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_RUN_NUMBER", "-1")
    with pytest.raises(ValidationError):
        AppSettings()


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BUILD_IDENTITY_LOG_LEVEL", "debug")
    assert AppSettings().log_level == "DEBUG"
