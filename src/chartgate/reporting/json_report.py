"""JSON report payloads for validation results."""

from __future__ import annotations

import json
from pathlib import Path

from chartgate import __version__
from chartgate.config import ConfigSnapshot, snapshot_fingerprint
from chartgate.constants.reporting import (
    MODE_COLLECT_ALL,
    MODE_FAIL_FAST,
    REPORT_SCHEMA_VERSION,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
)
from chartgate.io import write_json_atomic
from chartgate.model import ValidationResult
from chartgate.reporting.messages import format_advisory, format_error
from chartgate.types import JsonObject


def build_report(snapshot: ConfigSnapshot, result: ValidationResult, *, collect_all: bool = False) -> JsonObject:
    """Build the JSON report for one validation pass.

    Each error and advisory carries its rendered ``text`` next to the
    structured fields so the report can be surfaced verbatim.
    """
    payload = result.to_dict()
    payload["errors"] = [{**error.to_dict(), "text": format_error(error)} for error in result.errors]
    payload["advisories"] = [
        {**advisory.to_dict(), "text": format_advisory(advisory)} for advisory in result.advisories
    ]
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "tool_version": __version__,
        "sources": list(snapshot.sources),
        "fingerprint": snapshot_fingerprint(snapshot),
        "mode": MODE_COLLECT_ALL if collect_all else MODE_FAIL_FAST,
        **payload,
    }


def render_report(report: JsonObject) -> str:
    """Render a report as stable, indented JSON text."""
    return json.dumps(report, indent=2, sort_keys=True)


def write_report(path: Path, report: JsonObject) -> None:
    """Write a report atomically to ``path``."""
    write_json_atomic(
        path=path,
        payload=report,
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
