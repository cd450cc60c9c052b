"""Reconcile the ref with the manifest into one `BuildIdentity`.

Version comparison is exact string equality on the dotted form: `v1.2.3` and
`v1.2.3.0` are different versions, so manifest and tag must be written alike.
"""

from __future__ import annotations

import logging

from core.domain.errors import VersionMismatchError
from core.domain.models import BuildIdentity, ManifestVersion, ParsedTag

logger = logging.getLogger(__name__)


def snapshot_identity(manifest: ManifestVersion, run_number: int) -> BuildIdentity:
    """Identity of a branch build: manifest version plus the CI run counter."""

    app_version = manifest.prefixed
    identity = BuildIdentity(
        app_version=app_version,
        tag=f"{app_version}-snapshot-{run_number}",
        build=run_number,
    )
    logger.info("Snapshot identity: %s (build %d)", identity.tag, identity.build)
    return identity


def release_identity(parsed: ParsedTag, manifest: ManifestVersion) -> BuildIdentity:
    """Identity of a tag build; the tag must carry the manifest version."""

    expected = manifest.prefixed
    if parsed.version != expected:
        raise VersionMismatchError(expected=expected, actual=parsed.version)

    identity = BuildIdentity(
        app_version=parsed.version,
        tag=parsed.full_tag,
        build=parsed.build_number,
    )
    logger.info("Release identity: %s (build %d)", identity.tag, identity.build)
    return identity
