"""Ref classification and release tag parsing.

Both functions are pure: the same ref always yields the same result, and any
ref that does not fit is rejected with a typed error instead of a partial match.
"""

from __future__ import annotations

import logging
import re

from core.domain.errors import MalformedTagError, UnsupportedRefError
from core.domain.models import (
    BRANCH_REF_PREFIX,
    TAG_REF_PREFIX,
    BranchRef,
    ParsedTag,
    RefKind,
    TagRef,
)

logger = logging.getLogger(__name__)

# Groups: 1 => full tag (vX.Y.Z[.P]-build<N>), 2 => version digits,
# 3 => last dotted group (ignored), 4 => build number.
TAG_PATTERN = re.compile(
    r"^refs/tags/(v([0-9]+(\.[0-9]+){2,3})-build([0-9]+))$",
    flags=re.ASCII,
)


def classify_ref(ref: str) -> RefKind:
    """Classify a raw ref as a branch head or a tag."""

    if ref.startswith(BRANCH_REF_PREFIX) and len(ref) > len(BRANCH_REF_PREFIX):
        kind: RefKind = BranchRef(name=ref[len(BRANCH_REF_PREFIX):])
    elif ref.startswith(TAG_REF_PREFIX) and len(ref) > len(TAG_REF_PREFIX):
        kind = TagRef(raw=ref)
    else:
        raise UnsupportedRefError(ref)

    logger.debug("Classified ref %r as %s", ref, kind.kind)
    return kind


def parse_tag(tag: TagRef | str) -> ParsedTag:
    """Parse a tag ref against the release grammar.

    The whole ref must match, from `refs/tags/` to the end of the string.
    """

    raw = tag.raw if isinstance(tag, TagRef) else tag
    match = TAG_PATTERN.fullmatch(raw)
    if match is None:
        raise MalformedTagError(raw)

    parsed = ParsedTag(
        full_tag=match.group(1),
        version=f"v{match.group(2)}",
        build_number=int(match.group(4), 10),
    )
    logger.debug(
        "Parsed tag %r: version=%s build=%d",
        parsed.full_tag,
        parsed.version,
        parsed.build_number,
    )
    return parsed
