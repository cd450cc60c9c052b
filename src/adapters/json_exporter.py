"""JSON export of the resolved identity.

Why JSON:
- Later jobs (or other tools) can consume the identity and artifact names
  without re-running the checks.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.services.identity_pipeline import PipelineResult


def result_payload(result: PipelineResult) -> dict[str, Any]:
    """Stable, JSON-ready view of a pipeline result."""

    return {
        "kind": result.build_kind.value,
        "ref": result.ref_kind.model_dump(mode="json"),
        "manifest_version": result.manifest.raw,
        "identity": result.identity.model_dump(mode="json"),
        "plan": result.plan.model_dump(mode="json"),
    }


def export_result_json(*, result: PipelineResult, output_path: Path) -> Path:
    """Write the result to `output_path` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(result_payload(result), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
