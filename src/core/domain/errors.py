"""Domain errors.

Every failure of the identity pipeline is fatal: nothing here is retried or
recovered locally. Each error names the check that failed so the CLI can print
a diagnostic an operator can act on.
"""

from __future__ import annotations


class BuildIdentityError(Exception):
    """Base class for all build identity failures."""

    check = "build-identity"


class UnsupportedRefError(BuildIdentityError):
    """The ref is neither a branch head nor a tag."""

    check = "ref"

    def __init__(self, ref: str) -> None:
        self.ref = ref
        super().__init__(
            f"unsupported ref {ref!r}: expected refs/heads/<branch> or refs/tags/<tag>"
        )


class MalformedTagError(BuildIdentityError):
    """A tag ref does not match the release tag grammar."""

    check = "tag-grammar"

    def __init__(self, raw_ref: str) -> None:
        self.raw_ref = raw_ref
        super().__init__(
            f"tag ref {raw_ref!r} must be in format refs/tags/vX.Y.Z[.P]-build<N>"
        )


class ManifestReadError(BuildIdentityError):
    """The manifest is missing or declares no parseable version."""

    check = "manifest"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read version from {path}: {reason}")


class VersionMismatchError(BuildIdentityError):
    """The tag-embedded version disagrees with the manifest version."""

    check = "version-consistency"

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"tag version {actual!r} does not match manifest version {expected!r}"
        )


class MissingRunNumberError(BuildIdentityError):
    """A snapshot build was requested without a run counter."""

    check = "run-number"

    def __init__(self) -> None:
        super().__init__("snapshot builds need a run number (GITHUB_RUN_NUMBER)")


class IdentityAlreadyPublishedError(BuildIdentityError):
    """A second, different identity was published within the same run."""

    check = "publish"

    def __init__(self, current: str, attempted: str) -> None:
        self.current = current
        self.attempted = attempted
        super().__init__(
            f"identity {current!r} already published; refusing to publish {attempted!r}"
        )


class PublishError(BuildIdentityError):
    """The identity could not be written to a publication sink."""

    check = "publish"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"cannot write build identity to {path}: {reason}")
