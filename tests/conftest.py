from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

_ENV_VARS = (
    "GITHUB_REF",
    "GITHUB_RUN_NUMBER",
    "GITHUB_ENV",
    "BUILD_IDENTITY_REF",
    "BUILD_IDENTITY_RUN_NUMBER",
    "BUILD_IDENTITY_GITHUB_ENV",
    "BUILD_IDENTITY_MANIFEST_PATH",
    "BUILD_IDENTITY_ARTIFACT_BASENAME",
    "BUILD_IDENTITY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the runner's own CI variables and any `.env` out of the tests."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    def _write(version_line: str, name: str = "Cargo.toml") -> Path:
        path = tmp_path / name
        path.write_text(
            "[package]\n"
            'name = "ssi-man"\n'
            f"{version_line}\n"
            'edition = "2021"\n'
            "\n"
            "[dependencies]\n"
            'anyhow = { version = "1.0" }\n',
            encoding="utf-8",
        )
        return path

    return _write
