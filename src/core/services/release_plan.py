"""Names used by the downstream packaging, upload and release steps."""

from __future__ import annotations

from core.domain.models import BuildIdentity, BuildKind, DownstreamPlan

ARCHIVE_DIR = "target"


def plan_downstream(
    identity: BuildIdentity,
    kind: BuildKind,
    *,
    artifact_basename: str,
) -> DownstreamPlan:
    """Derive artifact names from the tag; only release builds are published."""

    archive_name = f"{artifact_basename}_{identity.tag}.tar.gz"
    is_release = kind is BuildKind.RELEASE
    return DownstreamPlan(
        archive_name=archive_name,
        archive_path=f"{ARCHIVE_DIR}/{archive_name}",
        artifact_set_name=f"artifacts-{identity.tag}",
        release_name=identity.tag if is_release else None,
        publish_release=is_release,
    )
