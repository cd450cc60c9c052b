"""Manifest source contract.

Why Protocol:
- The validator only needs "give me the declared version"; whether it comes
  from a Cargo.toml on disk or from a test double is an adapter detail.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ManifestVersion


@runtime_checkable
class ManifestReader(Protocol):
    """Minimal contract for a manifest version source.

    Design rules:
    - `read_version` is side-effect-free and idempotent within a run.
    - Failures raise `ManifestReadError`, never return a partial value.
    """

    def read_version(self) -> ManifestVersion:
        """Return the version declared by the manifest."""

        ...
