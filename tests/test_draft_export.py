"""Tests for draft result exports."""

import json
from datetime import datetime

import pandas as pd

from src.draft_manager.draft_controller import DraftController
from src.draft_manager.draft_export import (
    EXPORT_COLUMNS,
    DraftExporter,
    build_export,
    export_frame,
)
from src.draft_manager.draft_state import DraftConfig, DraftResult


class TestBuildExport:
    def test_summary_shape(self, sample_records):
        result = DraftController().run_draft(sample_records)
        config = DraftConfig(pick_delay_seconds=15, start_time=datetime(2026, 3, 1, 20, 0))
        export = build_export(result, config)

        assert export["started_at"] == result.started_at
        assert export["pick_delay_seconds"] == 15
        assert export["start_time"] == "2026-03-01T20:00:00"
        assert [t["name"] for t in export["teams"]] == ["Blue Owls", "Red Dogs"]
        assert [t["pre_draft_count"] for t in export["teams"]] == [1, 2]

    def test_order_is_global_pick_number(self, sample_records):
        export = build_export(DraftController().run_draft(sample_records))
        blue, red = export["teams"]
        assert [p["order"] for p in blue["picks"]] == [1, 2, 4, 6]
        assert [p["order"] for p in red["picks"]] == [3, 5]

    def test_pick_ids_and_names(self, sample_records):
        result = DraftController().run_draft(sample_records)
        export = build_export(result)
        first = export["teams"][0]["picks"][0]
        assert first["id"] == result.ranked[0].fighter_id
        assert first["name"] == result.ranked[0].display_name

    def test_without_start_time(self):
        export = build_export(DraftResult(ranked=[], slots=[]))
        assert export["start_time"] is None
        assert export["teams"] == []


class TestExportFrame:
    def test_rows_in_pick_order(self, sample_records):
        df = export_frame(build_export(DraftController().run_draft(sample_records)))
        assert list(df.columns) == EXPORT_COLUMNS
        assert list(df["order"]) == [1, 2, 3, 4, 5, 6]
        assert list(df["team"]) == [
            "Blue Owls", "Blue Owls", "Red Dogs", "Blue Owls", "Red Dogs", "Blue Owls",
        ]

    def test_empty(self):
        df = export_frame({"teams": []})
        assert df.empty
        assert list(df.columns) == EXPORT_COLUMNS


class TestDraftExporter:
    def test_writes_json_and_csv(self, tmp_path, sample_records):
        result = DraftController().run_draft(sample_records)
        paths = DraftExporter(tmp_path / "exports").save(result, stem="final")

        assert paths["json"].name == "final.json"
        with open(paths["json"], encoding="utf-8") as f:
            saved = json.load(f)
        assert len(saved["teams"]) == 2

        df = pd.read_csv(paths["csv"])
        assert len(df) == 6
        assert list(df["order"]) == [1, 2, 3, 4, 5, 6]

    def test_default_stem_from_start(self, tmp_path):
        result = DraftResult(ranked=[], slots=[], started_at="2026-03-01T20:00:00.123")
        paths = DraftExporter(tmp_path).save(result)
        assert paths["json"].name == "draft_2026-03-01T200000_123.json"
        assert paths["csv"].exists()
