"""Fighter data model - read-only view over a raw fighter record."""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Mapping

from src.fighter_pool.cleaning import safe_num
from src.fighter_pool.config import RECORD_FIELDS, STAT_FIELDS

STAT_NAMES = tuple(STAT_FIELDS)


@dataclass(frozen=True)
class Fighter:
    """A single fighter as the draft engine sees it."""

    fighter_id: Hashable
    name: str = ""
    team: str = ""
    is_custom: bool = False
    strength: float = 0.0
    speed: float = 0.0
    endurance: float = 0.0
    technique: float = 0.0
    wins: float = 0.0
    losses: float = 0.0
    draws: float = 0.0
    raw: Mapping = field(default_factory=dict, compare=False, hash=False, repr=False)

    @classmethod
    def from_record(cls, record: Mapping) -> "Fighter":
        """Build a Fighter from a stored record, coercing numeric fields."""
        numbers = {
            attr: safe_num(record.get(key))
            for attr, key in {**STAT_FIELDS, **RECORD_FIELDS}.items()
        }
        name = record.get("Name")
        team = record.get("Team")
        return cls(
            fighter_id=record.get("ID"),
            name="" if name is None else str(name),
            team="" if team is None else str(team),
            is_custom=bool(record.get("IsCustom")),
            raw=dict(record),
            **numbers,
        )

    @property
    def display_name(self) -> str:
        """Name for display; falls back to ``#<ID>`` for unnamed fighters."""
        return self.name or f"#{self.fighter_id}"

    @property
    def stats(self) -> Dict[str, float]:
        """The four combat stats keyed by stat name."""
        return {stat: getattr(self, stat) for stat in STAT_NAMES}

    def get_stat(self, stat: str) -> float:
        return getattr(self, stat)
