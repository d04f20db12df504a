"""Persisted JSON snapshot of a scan."""

from __future__ import annotations

import json
from pathlib import Path

from .models import ScanResult
from .validators.scan_result import validate_document


def render_report(result: ScanResult) -> str:
    """Return the pretty-printed, schema-checked JSON document for result."""
    document = result.to_dict()
    validate_document(document)
    return json.dumps(document, indent=2, ensure_ascii=False)


def write_report(result: ScanResult, output_path: Path) -> Path:
    """Write result to output_path.

    Raises OSError when the file cannot be written; callers treat that as
    fatal.
    """
    output_path.write_text(render_report(result), encoding="utf-8")
    return output_path
