"""Exporters for impact analysis results."""

from asteroid_impact.exporters.geojson_export import export_geojson
from asteroid_impact.exporters.json_export import export_json
from asteroid_impact.exporters.markdown_export import export_markdown

__all__ = ["export_geojson", "export_json", "export_markdown"]
