"""Manifest version reader (Cargo.toml style).

Grammar:
- The first line matching `version = "<digits-and-dots>"` (at line start) is
  authoritative; later declarations (e.g. in other tables) are ignored.
- A missing file, an undecodable file or the absence of such a line is a
  `ManifestReadError`.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from core.domain.errors import ManifestReadError
from core.domain.models import ManifestVersion

logger = logging.getLogger(__name__)

_VERSION_LINE = re.compile(r'^version\s*=\s*"([0-9]+(?:\.[0-9]+)*)"', flags=re.ASCII)


def parse_manifest_version(text: str, *, source: str = "<manifest>") -> ManifestVersion:
    """Extract the declared version from manifest text."""

    for line in text.splitlines():
        match = _VERSION_LINE.match(line)
        if match:
            return ManifestVersion(raw=match.group(1))
    raise ManifestReadError(source, 'no line of the form version = "X.Y.Z"')


class ManifestFileReader:
    """Reads the version from a manifest on disk.

    Each call re-reads the file; the result is the same for the whole run as
    long as nothing rewrites the manifest.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def read_version(self) -> ManifestVersion:
        if not self.path.is_file():
            raise ManifestReadError(str(self.path), "file not found")
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestReadError(str(self.path), str(exc)) from exc

        version = parse_manifest_version(text, source=str(self.path))
        logger.debug("Read version %s from %s", version.raw, self.path)
        return version
