"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-contained documentation (Field) without coupling
  the Core to files, CI runners or the process environment.
- Every model here is frozen: an identity is decided once and never edited.

Note:
- These models describe *what* a build event is, not *how* it is read.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


TAG_REF_PREFIX = "refs/tags/"
BRANCH_REF_PREFIX = "refs/heads/"
VERSION_PREFIX = "v"


class BuildKind(str, Enum):
    """Build event kinds handled by the pipeline."""

    SNAPSHOT = "snapshot"
    RELEASE = "release"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "Release build" if self is BuildKind.RELEASE else "Snapshot build"


class BranchRef(BaseModel):
    """A branch head (`refs/heads/<name>`): triggers a snapshot build."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["branch"] = "branch"
    name: str = Field(
        ...,
        min_length=1,
        description="Branch name without the `refs/heads/` prefix.",
    )

    @property
    def build_kind(self) -> BuildKind:
        return BuildKind.SNAPSHOT


class TagRef(BaseModel):
    """A tag ref (`refs/tags/<tag>`): triggers a release build."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tag"] = "tag"
    raw: str = Field(
        ...,
        min_length=len(TAG_REF_PREFIX) + 1,
        description="Full ref string as received from the triggering event.",
    )

    @property
    def build_kind(self) -> BuildKind:
        return BuildKind.RELEASE


RefKind = Annotated[Union[BranchRef, TagRef], Field(discriminator="kind")]


class ParsedTag(BaseModel):
    """A tag ref that matched the release grammar.

    `refs/tags/<full_tag>` always reconstructs the ref it was parsed from.
    """

    model_config = ConfigDict(frozen=True)

    full_tag: str = Field(
        ...,
        min_length=1,
        description="Everything after `refs/tags/` (e.g. `v1.2.3-build7`).",
    )
    version: str = Field(
        ...,
        pattern=r"^v[0-9]+(\.[0-9]+)*$",
        description="Version embedded in the tag, with its `v` prefix.",
    )
    build_number: int = Field(
        ...,
        ge=0,
        description="Trailing build number, parsed as base 10.",
    )

    @property
    def ref(self) -> str:
        return f"{TAG_REF_PREFIX}{self.full_tag}"


class ManifestVersion(BaseModel):
    """Version declared by the project manifest (digits and dots, no prefix)."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(
        ...,
        pattern=r"^[0-9]+(\.[0-9]+)*$",
        description="Declared version, e.g. `1.2.3`.",
    )

    @property
    def prefixed(self) -> str:
        """Version in tag form (`v1.2.3`)."""

        return f"{VERSION_PREFIX}{self.raw}"


class BuildIdentity(BaseModel):
    """The single authoritative output of the pipeline.

    Why a separate model:
    - Downstream steps (packaging, upload, release) only ever need this triple.
    - Frozen so nothing downstream of the publisher can alter it.
    """

    model_config = ConfigDict(frozen=True)

    app_version: str = Field(
        ...,
        min_length=2,
        description="Application version with its `v` prefix.",
    )
    tag: str = Field(
        ...,
        min_length=1,
        description="Release tag, or the synthesized snapshot tag.",
    )
    build: int = Field(
        ...,
        ge=0,
        description="Build number (tag build number or CI run number).",
    )

    def as_env(self) -> dict[str, str]:
        """Named entries as exposed to downstream steps."""

        return {
            "APP_VERSION": self.app_version,
            "TAG": self.tag,
            "BUILD": str(self.build),
        }


class DownstreamPlan(BaseModel):
    """Names the external collaborators use for their outputs."""

    model_config = ConfigDict(frozen=True)

    archive_name: str = Field(
        ...,
        min_length=1,
        description="Tarball produced by the packaging step.",
    )
    archive_path: str = Field(
        ...,
        min_length=1,
        description="Where the packaging step leaves the tarball.",
    )
    artifact_set_name: str = Field(
        ...,
        min_length=1,
        description="Name of the uploaded artifact set.",
    )
    release_name: str | None = Field(
        default=None,
        description="Name of the published release (release builds only).",
    )
    publish_release: bool = Field(
        default=False,
        description="Whether the publish step runs for this event.",
    )
