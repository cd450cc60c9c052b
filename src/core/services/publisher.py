"""Write-once publication of the build identity.

Why a publisher object instead of `os.environ`:
- Downstream steps receive an explicit, immutable mapping rather than ambient
  mutable process state.
- The single-write rule is enforced in one place; sinks (CI env files) only
  ever see one identity per run.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from core.domain.errors import IdentityAlreadyPublishedError
from core.domain.models import BuildIdentity
from core.interfaces.publisher import IdentitySink

logger = logging.getLogger(__name__)


class EnvironmentPublisher:
    """Exposes `APP_VERSION`, `TAG` and `BUILD` for the rest of the run."""

    def __init__(self, sinks: Iterable[IdentitySink] = ()) -> None:
        self._sinks = tuple(sinks)
        self._identity: BuildIdentity | None = None
        self._entries: Mapping[str, str] = MappingProxyType({})

    @property
    def identity(self) -> BuildIdentity | None:
        return self._identity

    @property
    def entries(self) -> Mapping[str, str]:
        """Read-only view of the published entries (empty until published)."""

        return self._entries

    def publish(self, identity: BuildIdentity) -> Mapping[str, str]:
        """Publish `identity`; republishing the same identity is a no-op."""

        if self._identity is not None:
            if self._identity == identity:
                logger.debug("Identity %s already published; nothing to do", identity.tag)
                return self._entries
            raise IdentityAlreadyPublishedError(
                current=self._identity.tag,
                attempted=identity.tag,
            )

        # Recorded before the sinks run: a failing sink never lets a retry
        # append the same entries twice to the sinks already written.
        entries = MappingProxyType(identity.as_env())
        self._identity = identity
        self._entries = entries

        for sink in self._sinks:
            sink.write(entries)

        logger.info("Published identity: %s", ", ".join(f"{k}={v}" for k, v in entries.items()))
        return entries
