"""JSON exporter for impact analysis results."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path

from asteroid_impact.models import ImpactAnalysis


def export_json(
    analysis: ImpactAnalysis,
    output_path: Path,
    indent: int = 2,
) -> Path:
    """Export one analysis as a JSON object."""
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(asdict(analysis), f, indent=indent, ensure_ascii=False)
    return output_path
