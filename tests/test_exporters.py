"""Tests for the export modules."""

from __future__ import annotations

import csv
import json
from dataclasses import replace

from impact_effects.exporters.csv_export import FIELDNAMES, export_csv
from impact_effects.exporters.geojson_export import export_geojson
from impact_effects.exporters.json_export import export_json
from impact_effects.exporters.markdown_export import export_markdown
from impact_effects.models import StageError
from impact_effects.summary import summarize_feed


class TestJSONExport:
    def test_exports_list_of_dicts(self, sample_reports, tmp_path):
        output = tmp_path / "test.json"
        export_json(sample_reports, output)

        with open(output) as f:
            data = json.load(f)

        assert isinstance(data, list)
        assert len(data) == 3
        assert data[0]["spec"]["name"] == "Europe hit"
        assert data[0]["spec"]["impact_date"] == "2026-03-01T00:00:00+00:00"
        assert data[0]["errors"] == []

    def test_returns_output_path(self, sample_reports, tmp_path):
        output = tmp_path / "test.json"
        result = export_json(sample_reports, output)
        assert result == output

    def test_summary_wraps_reports(self, sample_reports, tmp_path):
        output = tmp_path / "feed.json"
        export_json(sample_reports, output, summary=summarize_feed(sample_reports))

        data = json.loads(output.read_text())
        assert set(data) == {"summary", "reports"}
        assert data["summary"]["total_objects"] == 3
        assert data["summary"]["most_dangerous"]["name"] == "Europe hit"

    def test_failed_stage_serialized(self, europe_report, tmp_path):
        broken = replace(
            europe_report, mitigation=StageError("mitigation", "Mitigation strategy calculation failed")
        )
        output = tmp_path / "broken.json"
        export_json([broken], output)

        data = json.loads(output.read_text())
        assert data[0]["mitigation"]["error"] == "Mitigation strategy calculation failed"
        assert data[0]["errors"][0]["stage"] == "mitigation"


class TestGeoJSONExport:
    def test_exports_feature_collection(self, sample_reports, tmp_path):
        output = tmp_path / "test.geojson"
        export_geojson(sample_reports, output)

        with open(output) as f:
            data = json.load(f)

        assert data["type"] == "FeatureCollection"
        assert data["metadata"]["source"] == "impact-effects"
        assert data["metadata"]["report_count"] == 3
        assert data["metadata"]["impact_point_count"] == 2

    def test_feature_types(self, sample_reports, tmp_path):
        output = tmp_path / "test.geojson"
        export_geojson(sample_reports, output)
        features = json.loads(output.read_text())["features"]

        types = [f["properties"]["feature_type"] for f in features]
        assert types.count("impact_point") == 2
        assert types.count("evacuation_zone") == 10
        assert types.count("probability_sample") == 150

    def test_coordinates_are_lon_lat(self, europe_report, tmp_path):
        output = tmp_path / "test.geojson"
        export_geojson([europe_report], output)
        features = json.loads(output.read_text())["features"]

        impact = next(f for f in features if f["properties"]["feature_type"] == "impact_point")
        assert impact["geometry"]["coordinates"] == [10.0, 50.0]
        assert impact["properties"]["region"] == "Europe"

    def test_failed_geography_contributes_nothing(self, europe_report, tmp_path):
        broken = replace(
            europe_report, geographic=StageError("geographic", "Geographic impact calculation failed")
        )
        output = tmp_path / "test.geojson"
        export_geojson([broken], output)
        data = json.loads(output.read_text())
        assert data["features"] == []
        assert data["metadata"]["impact_point_count"] == 0


class TestCSVExport:
    def test_one_row_per_report(self, sample_reports, tmp_path):
        output = tmp_path / "test.csv"
        export_csv(sample_reports, output)

        with open(output, newline="") as f:
            rows = list(csv.DictReader(f))

        assert len(rows) == 3
        assert list(rows[0]) == FIELDNAMES
        assert rows[0]["name"] == "Europe hit"
        assert rows[0]["region"] == "Europe"
        assert rows[1]["tsunami"] == "True"
        assert rows[0]["tsunami"] == "False"

    def test_missing_point_leaves_columns_empty(self, sample_reports, tmp_path):
        output = tmp_path / "test.csv"
        export_csv(sample_reports, output)

        with open(output, newline="") as f:
            near_miss = list(csv.DictReader(f))[2]

        assert near_miss["region"] == ""
        assert near_miss["impact_latitude"] == ""
        assert near_miss["recommended_approach"] == "RAPID_DEFLECTION"

    def test_failed_stages_column(self, europe_report, tmp_path):
        broken = replace(europe_report, seismic=StageError("seismic", "Seismic calculation failed"))
        output = tmp_path / "test.csv"
        export_csv([broken], output)

        with open(output, newline="") as f:
            row = next(csv.DictReader(f))
        assert row["failed_stages"] == "seismic"
        assert row["primary_magnitude"] == ""


class TestMarkdownExport:
    def test_contains_overview_and_sections(self, sample_reports, tmp_path):
        output = tmp_path / "test.md"
        export_markdown(sample_reports, output)
        content = output.read_text()

        assert content.startswith("# Impact Effects Report")
        assert "## Overview" in content
        assert "## Europe hit" in content
        assert "## Pacific hit" in content
        assert "**Tsunami**" in content
        assert "| total destruction |" in content

    def test_feed_summary_section(self, sample_reports, tmp_path):
        output = tmp_path / "test.md"
        export_markdown(sample_reports, output, summary=summarize_feed(sample_reports))
        content = output.read_text()

        assert "## Feed Summary" in content
        assert "Most dangerous: Europe hit (2026-03-01, CRITICAL)" in content

    def test_no_summary_section_without_summary(self, sample_reports, tmp_path):
        output = tmp_path / "test.md"
        export_markdown(sample_reports, output)
        assert "## Feed Summary" not in output.read_text()

    def test_failed_stages_listed(self, europe_report, tmp_path):
        broken = replace(
            europe_report,
            blast=StageError("blast", "Blast radius calculation failed", "no crater"),
        )
        output = tmp_path / "test.md"
        export_markdown([broken], output)
        content = output.read_text()

        assert "**Failed stages**" in content
        assert "- blast: Blast radius calculation failed - no crater" in content
