"""Sink that mirrors the published identity into the CI environment file.

GitHub Actions reads `KEY=value` lines appended to `$GITHUB_ENV` and exposes
them to every later step of the job.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from core.domain.errors import PublishError

logger = logging.getLogger(__name__)


class GitHubEnvFileSink:
    def __init__(self, path: Path) -> None:
        self.path = path

    def write(self, entries: Mapping[str, str]) -> None:
        lines = "".join(f"{key}={value}\n" for key, value in entries.items())
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(lines)
        except OSError as exc:
            raise PublishError(str(self.path), exc.strerror or str(exc)) from exc
        logger.debug("Appended %d entries to %s", len(entries), self.path)
