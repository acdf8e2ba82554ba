"""Draft state data models - slots, picks, configuration and results."""

from dataclasses import dataclass, field
from datetime import datetime
import logging
import math
from typing import List, Optional

from src.draft_manager.config import (
    DEFAULT_PICK_DELAY_SECONDS,
    MAX_PICK_DELAY_SECONDS,
    MIN_PICK_DELAY_SECONDS,
)
from src.fighter_pool.cleaning import safe_num
from src.fighter_pool.models import Fighter

logger = logging.getLogger(__name__)


def clamp_seconds(value, low: float, high: float, default: float) -> float:
    """Clamp a delay to [low, high]; missing or non-finite values use *default*."""
    if value is None or isinstance(value, bool):
        return float(default)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return float(default)
    if not math.isfinite(number):
        return float(default)
    return max(float(low), min(float(high), number))


def parse_start_time(value) -> Optional[datetime]:
    """Parse a start time setting; blank or unparseable input means "now"."""
    if value is None or isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.warning("Ignoring unparseable start time %r", value)
        return None


@dataclass
class DraftSlot:
    """One team's place in the draft."""

    name: str
    members: List[Fighter] = field(default_factory=list)
    picks: List[Fighter] = field(default_factory=list)

    @property
    def pre_draft_count(self) -> int:
        """Roster size before this draft started."""
        return len(self.members)

    @property
    def current_size(self) -> int:
        return self.pre_draft_count + len(self.picks)

    def add_pick(self, fighter: Fighter):
        """Append a drafted fighter. Picks are never reordered or removed."""
        self.picks.append(fighter)


@dataclass
class Pick:
    """Represents a single draft pick."""

    pick_number: int
    team_name: str
    fighter: Fighter
    timestamp: str

    @classmethod
    def create(cls, pick_number: int, team_name: str, fighter: Fighter):
        return cls(
            pick_number=pick_number,
            team_name=team_name,
            fighter=fighter,
            timestamp=datetime.now().isoformat(),
        )


@dataclass
class DraftConfig:
    """Timing settings for a live draft.

    Direct construction accepts a zero delay; user input goes through
    :meth:`from_user_input`, which enforces the one-second minimum.
    """

    pick_delay_seconds: float = DEFAULT_PICK_DELAY_SECONDS
    start_time: Optional[datetime] = None

    def __post_init__(self):
        self.pick_delay_seconds = clamp_seconds(
            self.pick_delay_seconds,
            0,
            MAX_PICK_DELAY_SECONDS,
            DEFAULT_PICK_DELAY_SECONDS,
        )
        self.start_time = parse_start_time(self.start_time)

    @classmethod
    def from_user_input(cls, pick_delay=None, start_time=None) -> "DraftConfig":
        """Build a config from raw form/CLI values, clamped to [1, 3600] s.

        Blank, zero or non-numeric delays fall back to the default.
        """
        raw = safe_num(pick_delay) or DEFAULT_PICK_DELAY_SECONDS
        delay = clamp_seconds(
            raw,
            MIN_PICK_DELAY_SECONDS,
            MAX_PICK_DELAY_SECONDS,
            DEFAULT_PICK_DELAY_SECONDS,
        )
        return cls(pick_delay_seconds=delay, start_time=start_time)

    def start_delay_seconds(self, now: Optional[datetime] = None) -> float:
        """Seconds until ``start_time``; 0 when unset or already past."""
        if self.start_time is None:
            return 0.0
        if now is None:
            now = datetime.now(self.start_time.tzinfo)
        return max(0.0, (self.start_time - now).total_seconds())


@dataclass
class DraftResult:
    """Outcome of a batch or live draft run."""

    ranked: List[Fighter]
    slots: List[DraftSlot]
    picks: List[Pick] = field(default_factory=list)
    started_at: str = field(default_factory=lambda: datetime.now().isoformat())
    completed_at: Optional[str] = None
    cancelled: bool = False

    @property
    def total_picks(self) -> int:
        return len(self.picks)

    @property
    def is_complete(self) -> bool:
        """True when every ranked fighter has been drafted."""
        return not self.cancelled and len(self.picks) == len(self.ranked)

    def get_slot(self, name: str) -> Optional[DraftSlot]:
        for slot in self.slots:
            if slot.name == name:
                return slot
        return None
