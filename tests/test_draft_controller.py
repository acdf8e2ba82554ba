"""Tests for batch allocation, the draft controller and run estimates."""

from datetime import datetime

import pytest

from src.draft_manager.draft_controller import (
    DraftController,
    allocate,
    estimate_draft,
    human_duration,
)
from src.draft_manager.draft_initializer import DraftInitializer
from src.draft_manager.draft_rules import DraftRules
from src.draft_manager.draft_state import DraftConfig, DraftSlot
from src.fighter_pool.models import Fighter


def _ranked(count):
    return [Fighter(fighter_id=f"r{i}", name=f"R{i}") for i in range(count)]


def _slot(name, size):
    return DraftSlot(
        name=name,
        members=[Fighter(fighter_id=f"{name}{i}") for i in range(size)],
    )


# ── allocate ─────────────────────────────────────────────────────────


class TestAllocate:
    def test_smallest_team_catches_up_first(self):
        ranked = _ranked(4)
        slots = [_slot("Zero", 0), _slot("Three", 3)]
        result = allocate(ranked, slots)
        assert slots[0].picks == ranked
        assert slots[1].picks == []
        assert result.cursor == 4

    def test_bucket_round_robin(self):
        ranked = _ranked(5)
        slots = [_slot("A", 1), _slot("B", 1), _slot("C", 2)]
        allocate(ranked, slots)
        assert [f.fighter_id for f in slots[0].picks] == ["r0", "r3"]
        assert [f.fighter_id for f in slots[1].picks] == ["r1", "r4"]
        assert [f.fighter_id for f in slots[2].picks] == ["r2"]

    def test_pick_log(self):
        ranked = _ranked(3)
        slots = [_slot("A", 0), _slot("B", 0)]
        result = allocate(ranked, slots)
        assert [(p.pick_number, p.team_name, p.fighter.fighter_id) for p in result.picks] == [
            (1, "A", "r0"), (2, "B", "r1"), (3, "A", "r2"),
        ]

    def test_every_fighter_drafted_once(self):
        ranked = _ranked(11)
        slots = [_slot("A", 2), _slot("B", 0), _slot("C", 5)]
        allocate(ranked, slots)
        drafted = [f for s in slots for f in s.picks]
        assert sorted(f.fighter_id for f in drafted) == sorted(f.fighter_id for f in ranked)

    def test_fairness_after_each_pick(self):
        ranked = _ranked(9)
        slots = [_slot("A", 1), _slot("B", 1), _slot("C", 1)]
        result = allocate(ranked, slots)
        replay = [_slot("A", 1), _slot("B", 1), _slot("C", 1)]
        by_name = {s.name: s for s in replay}
        for pick in result.picks:
            assert DraftRules.is_eligible(by_name[pick.team_name], replay)
            by_name[pick.team_name].add_pick(pick.fighter)
            assert DraftRules.size_spread(replay) <= 1

    @pytest.mark.parametrize("ranked_count, slot_count", [(0, 2), (3, 0)])
    def test_degenerate_inputs(self, ranked_count, slot_count):
        slots = [_slot(f"S{i}", 0) for i in range(slot_count)]
        result = allocate(_ranked(ranked_count), slots)
        assert result.picks == []
        assert result.cursor == 0


# ── DraftController ──────────────────────────────────────────────────


class TestDraftController:
    def test_runs_sample_draft(self, sample_records):
        result = DraftController().run_draft(sample_records)
        assert [s.name for s in result.slots] == ["Blue Owls", "Red Dogs"]
        assert result.total_picks == 6
        assert result.is_complete
        blue, red = result.slots
        ranked = result.ranked
        assert blue.picks == [ranked[0], ranked[1], ranked[3], ranked[5]]
        assert red.picks == [ranked[2], ranked[4]]
        assert result.completed_at is not None

    def test_reads_store_when_no_fighters_given(self, seeded_store):
        controller = DraftController(DraftInitializer(store=seeded_store))
        assert controller.run_draft().total_picks == 6

    def test_no_teams_is_empty_result(self, record_factory):
        result = DraftController().run_draft([record_factory(1), record_factory(2)])
        assert len(result.ranked) == 2
        assert result.slots == []
        assert result.picks == []

    def test_no_pool_is_empty_result(self, record_factory):
        result = DraftController().run_draft([record_factory(1, team="Red Dogs")])
        assert result.ranked == []
        assert result.picks == []
        assert result.slots[0].picks == []

    def test_deterministic(self, sample_records):
        first = DraftController().run_draft(sample_records)
        second = DraftController().run_draft(sample_records)
        assert first.ranked == second.ranked
        assert [s.picks for s in first.slots] == [s.picks for s in second.slots]

    def test_store_not_mutated(self, seeded_store, sample_records):
        DraftController(DraftInitializer(store=seeded_store)).run_draft()
        assert seeded_store.get_json("fighters") == sample_records

    def test_estimate(self, sample_records):
        estimate = DraftController().estimate(DraftConfig(pick_delay_seconds=30), sample_records)
        assert estimate.picks == 6
        assert estimate.total_seconds == 180
        assert estimate.duration == "3m 0s"


# ── Estimates ────────────────────────────────────────────────────────


class TestEstimate:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "0s"), (59, "59s"), (60, "1m 0s"), (3723, "1h 2m 3s"), (7200, "2h 0m 0s"), (-4, "0s")],
    )
    def test_human_duration(self, seconds, expected):
        assert human_duration(seconds) == expected

    def test_finish_from_now(self):
        now = datetime(2026, 3, 1, 18, 0)
        estimate = estimate_draft(4, DraftConfig(pick_delay_seconds=15), now=now)
        assert estimate.finish_at == datetime(2026, 3, 1, 18, 1)

    def test_finish_from_start_time(self):
        start = datetime(2026, 3, 1, 20, 0)
        config = DraftConfig(pick_delay_seconds=10, start_time=start)
        estimate = estimate_draft(6, config, now=datetime(2026, 3, 1, 18, 0))
        assert estimate.finish_at == datetime(2026, 3, 1, 20, 1)
