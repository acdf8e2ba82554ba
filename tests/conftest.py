"""Shared fixtures for the fighter draft test suite."""

import pytest

from src.fighter_pool.config import FIGHTERS_KEY
from src.fighter_pool.store import JsonStore


# ------------------------------------------------------------------
# Async tests run on asyncio only (the live draft uses asyncio tasks)
# ------------------------------------------------------------------

@pytest.fixture
def anyio_backend():
    return "asyncio"


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no shared state
# ------------------------------------------------------------------

def make_record(fid, name=None, team="", **overrides):
    """Raw fighter record in the stored sheet format."""
    record = {
        "ID": fid,
        "Name": name if name is not None else f"Fighter {fid}",
        "Team": team,
        "IsCustom": False,
        "Strength": 50,
        "Speed": 50,
        "Endurance": 50,
        "Technique": 50,
        "Wins": 0,
        "Losses": 0,
        "Draws": 0,
    }
    record.update(overrides)
    return record


@pytest.fixture
def sample_records():
    """Six pool fighters and two teams (sizes 2 and 1)."""
    return [
        make_record(1, "Ace", Strength=90, Speed=80),
        make_record(2, "Brick", team="Red Dogs"),
        make_record(3, "Comet", team="free agent", Speed=95),
        make_record(4, "Dune", team="Red Dogs"),
        make_record(5, "Echo", IsCustom=True, Technique=70),
        make_record(6, "Flint", team="Blue Owls"),
        make_record(7, "Gale", team="FA", Strength=20, Speed=20),
        make_record(8, "Haze", team="Custom Fighters", Endurance=85),
        make_record(9, "Iris", team="  ", Wins=5, Losses=1),
    ]


@pytest.fixture
def store(tmp_path):
    return JsonStore(tmp_path / "store")


@pytest.fixture
def seeded_store(store, sample_records):
    store.set_json(FIGHTERS_KEY, sample_records)
    return store


@pytest.fixture
def record_factory():
    return make_record
