"""Tests for the draft command-line entry point."""

import json
import logging

import pytest

from src import run_draft
from src.draft_manager.draft_initializer import DraftInitializer
from src.draft_manager.draft_state import DraftConfig
from src.draft_manager.power_ranker import PowerRanker
from src.run_draft import cli, main, parse_args, run_batch, run_live


class _CountingRanker(PowerRanker):
    def __init__(self):
        self.calls = 0

    def rank_with_scores(self, pool):
        self.calls += 1
        return super().rank_with_scores(pool)


def _cli_args(store, tmp_path, *extra):
    return [
        "--store-dir", str(store.storage_dir),
        "--log-dir", str(tmp_path / "logs"),
        *extra,
    ]


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert not args.live
        assert not args.follow_volatility
        assert args.delay is None
        assert args.log_level == "INFO"

    def test_live_options(self):
        args = parse_args(["--live", "--delay", "5", "--start", "2026-03-01T20:00", "--follow-volatility"])
        assert args.live
        assert args.delay == "5"
        assert args.start == "2026-03-01T20:00"
        assert args.follow_volatility


class TestMain:
    def test_batch_run(self, seeded_store, tmp_path, capsys):
        assert main(_cli_args(seeded_store, tmp_path)) == 0
        out = capsys.readouterr().out
        assert "Draft pool ranking" in out
        assert "Blue Owls (5) before: 1 • picks: 4" in out
        assert "Red Dogs (4) before: 2 • picks: 2" in out

    def test_batch_export(self, seeded_store, tmp_path, capsys):
        export_dir = tmp_path / "exports"
        code = main(_cli_args(seeded_store, tmp_path, "--export", "--export-dir", str(export_dir)))
        assert code == 0
        exported = sorted(export_dir.glob("*.json"))
        assert len(exported) == 1
        with open(exported[0], encoding="utf-8") as f:
            assert len(json.load(f)["teams"]) == 2
        assert "Exported:" in capsys.readouterr().out

    def test_empty_store(self, store, tmp_path, capsys):
        assert main(_cli_args(store, tmp_path)) == 0
        out = capsys.readouterr().out
        assert "(empty)" in out


class TestRunLive:
    @pytest.mark.anyio
    async def test_live_run_prints_estimate_and_picks(self, seeded_store, capsys):
        initializer = DraftInitializer(store=seeded_store)
        args = parse_args([])
        result = await run_live(initializer, DraftConfig(pick_delay_seconds=0), args)

        out = capsys.readouterr().out
        assert out.startswith("Est. duration for 6 picks: 0s")
        assert "(if start now)" in out
        assert "#1 Blue Owls select" in out
        assert result.is_complete

    @pytest.mark.anyio
    async def test_live_run_ranks_once(self, seeded_store, capsys):
        ranker = _CountingRanker()
        initializer = DraftInitializer(store=seeded_store, ranker=ranker)
        await run_live(initializer, DraftConfig(pick_delay_seconds=0), parse_args([]))
        assert ranker.calls == 1


class TestRunBatch:
    def test_ranks_once(self, seeded_store, capsys):
        ranker = _CountingRanker()
        initializer = DraftInitializer(store=seeded_store, ranker=ranker)
        result = run_batch(initializer, parse_args([]))
        assert ranker.calls == 1
        assert result.total_picks == 6


class TestCli:
    def test_success(self, seeded_store, tmp_path, capsys):
        assert cli(_cli_args(seeded_store, tmp_path)) == 0

    def test_failure_is_logged_with_exit_one(self, monkeypatch, caplog):
        def broken(argv=None):
            raise RuntimeError("store unreadable")

        monkeypatch.setattr(run_draft, "main", broken)
        with caplog.at_level(logging.ERROR, logger="src.run_draft"):
            assert cli([]) == 1
        assert "Draft failed" in caplog.text
        assert "store unreadable" in caplog.text

    def test_interrupt_exits_130(self, monkeypatch):
        def interrupted(argv=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(run_draft, "main", interrupted)
        assert cli([]) == 130
