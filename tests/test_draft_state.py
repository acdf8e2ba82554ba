"""Tests for draft configuration and result models."""

from datetime import datetime, timedelta

import pytest

from src.draft_manager.draft_state import (
    DraftConfig,
    DraftResult,
    DraftSlot,
    Pick,
    clamp_seconds,
    parse_start_time,
)
from src.fighter_pool.models import Fighter


# ── Helpers ──────────────────────────────────────────────────────────


class TestClampSeconds:
    @pytest.mark.parametrize(
        "value, expected",
        [(5, 5.0), (-3, 1.0), (9999, 3600.0), ("12", 12.0), (None, 10.0),
         ("soon", 10.0), (float("nan"), 10.0), (True, 10.0)],
    )
    def test_values(self, value, expected):
        assert clamp_seconds(value, 1, 3600, 10) == expected


class TestParseStartTime:
    def test_iso_string(self):
        assert parse_start_time("2026-03-01T18:30") == datetime(2026, 3, 1, 18, 30)

    @pytest.mark.parametrize("value", [None, "", "   ", "next tuesday"])
    def test_blank_or_invalid_is_none(self, value):
        assert parse_start_time(value) is None

    def test_datetime_passes_through(self):
        when = datetime(2026, 1, 1)
        assert parse_start_time(when) is when


# ── DraftConfig ──────────────────────────────────────────────────────


class TestDraftConfig:
    def test_defaults(self):
        config = DraftConfig()
        assert config.pick_delay_seconds == 10
        assert config.start_time is None

    def test_direct_construction_allows_zero(self):
        assert DraftConfig(pick_delay_seconds=0).pick_delay_seconds == 0

    def test_direct_construction_clamps_high(self):
        assert DraftConfig(pick_delay_seconds=7200).pick_delay_seconds == 3600

    @pytest.mark.parametrize(
        "raw, expected",
        [("30", 30.0), ("", 10.0), (None, 10.0), ("0", 10.0), ("abc", 10.0),
         ("-5", 1.0), ("0.2", 1.0), ("99999", 3600.0)],
    )
    def test_from_user_input(self, raw, expected):
        assert DraftConfig.from_user_input(raw).pick_delay_seconds == expected

    def test_from_user_input_parses_start(self):
        config = DraftConfig.from_user_input("5", "2026-03-01T18:30:00")
        assert config.start_time == datetime(2026, 3, 1, 18, 30)

    def test_start_delay_unset(self):
        assert DraftConfig().start_delay_seconds() == 0.0

    def test_start_delay_future(self):
        now = datetime(2026, 3, 1, 18, 0)
        config = DraftConfig(start_time=now + timedelta(seconds=90))
        assert config.start_delay_seconds(now) == 90.0

    def test_start_delay_past_is_zero(self):
        now = datetime(2026, 3, 1, 18, 0)
        config = DraftConfig(start_time=now - timedelta(minutes=5))
        assert config.start_delay_seconds(now) == 0.0


# ── Slots, picks and results ─────────────────────────────────────────


class TestDraftSlot:
    def test_sizes(self):
        slot = DraftSlot(name="A", members=[Fighter(fighter_id=1)])
        assert slot.pre_draft_count == 1
        slot.add_pick(Fighter(fighter_id=2))
        assert slot.pre_draft_count == 1
        assert slot.current_size == 2


class TestDraftResult:
    def _result(self, picks, cancelled=False):
        ranked = [Fighter(fighter_id=i) for i in range(2)]
        slot = DraftSlot(name="A")
        result = DraftResult(ranked=ranked, slots=[slot], cancelled=cancelled)
        for i in range(picks):
            result.picks.append(Pick.create(i + 1, "A", ranked[i]))
        return result

    def test_complete_when_all_drafted(self):
        result = self._result(2)
        assert result.total_picks == 2
        assert result.is_complete

    def test_partial_is_not_complete(self):
        assert not self._result(1).is_complete

    def test_cancelled_is_not_complete(self):
        assert not self._result(2, cancelled=True).is_complete

    def test_get_slot(self):
        result = self._result(0)
        assert result.get_slot("A").name == "A"
        assert result.get_slot("Z") is None
