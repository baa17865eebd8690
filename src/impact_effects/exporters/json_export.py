"""JSON exporter for effects reports."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date, datetime
from pathlib import Path
from typing import Any

from impact_effects.models import EffectsReport, FeedSummary


def json_default(value: Any) -> Any:
    """Serialize the non-JSON types that appear in reports."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def report_to_dict(report: EffectsReport) -> dict[str, Any]:
    data = asdict(report)
    data["errors"] = [asdict(e) for e in report.errors]
    return data


def export_json(
    reports: list[EffectsReport],
    output_path: Path,
    indent: int = 2,
    *,
    summary: FeedSummary | None = None,
) -> Path:
    """Export reports to a JSON file; a feed summary wraps them in an object."""
    data: Any = [report_to_dict(r) for r in reports]
    if summary is not None:
        data = {"summary": asdict(summary), "reports": data}
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False, default=json_default)
    return output_path
