"""Build identity orchestration.

This module chains the checks in their fixed order:
ref classification -> tag grammar (tags only) -> manifest -> consistency.
The CLI delegates all decisions to `resolve_build_identity`, which keeps
side-effects (printing, env files) out of the core logic and makes the flow
reusable from tests or other entry-points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.domain.errors import MissingRunNumberError
from core.domain.models import (
    BuildIdentity,
    BuildKind,
    DownstreamPlan,
    ManifestVersion,
    ParsedTag,
    RefKind,
    TagRef,
)
from core.interfaces.manifest import ManifestReader
from core.services.consistency import release_identity, snapshot_identity
from core.services.ref_parser import classify_ref, parse_tag
from core.services.release_plan import plan_downstream

logger = logging.getLogger(__name__)

DEFAULT_ARTIFACT_BASENAME = "libssi_man"


@dataclass(frozen=True)
class IdentityRequest:
    """Inputs of one build event."""

    ref: str
    run_number: int | None = None
    artifact_basename: str = DEFAULT_ARTIFACT_BASENAME


@dataclass(frozen=True)
class PipelineResult:
    """Output of a pipeline invocation."""

    identity: BuildIdentity
    ref_kind: RefKind
    manifest: ManifestVersion
    plan: DownstreamPlan
    parsed_tag: ParsedTag | None = None

    @property
    def build_kind(self) -> BuildKind:
        return self.ref_kind.build_kind


def _read_manifest(reader: ManifestReader) -> ManifestVersion:
    manifest = reader.read_version()
    logger.debug("Manifest declares version %s", manifest.raw)
    return manifest


def resolve_build_identity(
    *,
    request: IdentityRequest,
    reader: ManifestReader,
) -> PipelineResult:
    """Run every check and return the validated identity.

    Any failure raises a `BuildIdentityError` subclass; no partial result is
    ever returned.
    """

    ref_kind = classify_ref(request.ref)

    parsed: ParsedTag | None = None
    if isinstance(ref_kind, TagRef):
        parsed = parse_tag(ref_kind)
        manifest = _read_manifest(reader)
        identity = release_identity(parsed, manifest)
    else:
        if request.run_number is None:
            raise MissingRunNumberError()
        manifest = _read_manifest(reader)
        identity = snapshot_identity(manifest, request.run_number)

    plan = plan_downstream(
        identity,
        ref_kind.build_kind,
        artifact_basename=request.artifact_basename,
    )
    return PipelineResult(
        identity=identity,
        ref_kind=ref_kind,
        manifest=manifest,
        plan=plan,
        parsed_tag=parsed,
    )
