"""Data models for the volatility engine."""

from dataclasses import dataclass, field
import random
from typing import Hashable, List, Optional, Tuple

from src.fighter_pool.models import Fighter


@dataclass(frozen=True)
class ContestEvent:
    """A named head-to-head contest decided by one stat or a coin flip."""

    name: str
    stat: Optional[str] = None

    def compare(self, a: Fighter, b: Fighter, rng: random.Random) -> int:
        """Positive if *a* wins, negative if *b* wins, 0 for a tie."""
        if self.stat is None:
            return rng.choice((1, -1))
        diff = a.get_stat(self.stat) - b.get_stat(self.stat)
        if diff > 0:
            return 1
        if diff < 0:
            return -1
        return 0


@dataclass
class FitRecommendation:
    """Best-fit fighter for the team on the clock."""

    fighter: Fighter
    score: float
    team_name: Optional[str] = None


@dataclass
class TickReport:
    """What happened during one volatility tick."""

    event: ContestEvent
    # (winner_id, loser_id) per decided contest; ties are not recorded
    results: List[Tuple[Hashable, Hashable]] = field(default_factory=list)
    top_candidate_id: Optional[Hashable] = None
    best_fit: Optional[FitRecommendation] = None
