"""Exporters for impact effects reports."""

from impact_effects.exporters.csv_export import export_csv
from impact_effects.exporters.geojson_export import export_geojson
from impact_effects.exporters.json_export import export_json
from impact_effects.exporters.markdown_export import export_markdown

__all__ = ["export_csv", "export_geojson", "export_json", "export_markdown"]
