"""Contract for places the published identity is mirrored to."""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class IdentitySink(Protocol):
    """Receives the published entries exactly once per run."""

    def write(self, entries: Mapping[str, str]) -> None:
        ...
