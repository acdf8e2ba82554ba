"""Draft controller - batch allocation of the ranked pool to teams."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
import logging
from typing import List, Optional, Sequence

from src.draft_manager.draft_initializer import DraftInitializer, PreparedDraft
from src.draft_manager.draft_rules import DraftRules
from src.draft_manager.draft_state import (
    DraftConfig,
    DraftResult,
    DraftSlot,
    Pick,
)
from src.fighter_pool.models import Fighter

logger = logging.getLogger(__name__)


@dataclass
class AllocationResult:
    """Slots with their picks, the global pick log and the pool cursor."""

    slots: List[DraftSlot]
    picks: List[Pick] = field(default_factory=list)
    cursor: int = 0


def allocate(ranked: Sequence[Fighter], slots: List[DraftSlot]) -> AllocationResult:
    """Assign *ranked* fighters to *slots*, smallest teams first.

    Repeats until the pool is exhausted: find every slot at the minimum
    current size and give each of them the next ranked fighter, stopping
    mid-bucket when the pool runs out. The bucket is never empty and the
    cursor advances on every pick, so the loop always terminates.
    """
    result = AllocationResult(slots=slots)
    if not ranked or not slots:
        return result

    while result.cursor < len(ranked):
        for slot in DraftRules.bucket(slots):
            if result.cursor >= len(ranked):
                break
            fighter = ranked[result.cursor]
            result.cursor += 1
            slot.add_pick(fighter)
            result.picks.append(
                Pick.create(len(result.picks) + 1, slot.name, fighter)
            )

    return result


def human_duration(total_seconds: float) -> str:
    """Format seconds as ``1h 2m 3s`` (hours and minutes only when needed)."""
    s = max(0, int(total_seconds))
    hours, rest = divmod(s, 3600)
    minutes, seconds = divmod(rest, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes or hours:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")
    return " ".join(parts)


@dataclass
class DraftEstimate:
    picks: int
    total_seconds: float
    duration: str
    finish_at: datetime


def estimate_draft(
    pool_size: int,
    config: DraftConfig,
    now: Optional[datetime] = None,
) -> DraftEstimate:
    """Estimate how long a live draft of *pool_size* picks will run."""
    total = config.pick_delay_seconds * pool_size
    base = config.start_time or now or datetime.now()
    return DraftEstimate(
        picks=pool_size,
        total_seconds=total,
        duration=human_duration(total),
        finish_at=base + timedelta(seconds=total),
    )


class DraftController:
    """Runs the whole draft in one pass, with no delays or randomness.

    Identical inputs always produce the identical ranked order and
    identical per-team pick sequences.
    """

    def __init__(self, initializer: Optional[DraftInitializer] = None):
        self.initializer = initializer or DraftInitializer()

    def run_draft(self, fighters=None) -> DraftResult:
        """Classify, rank and allocate *fighters* (or the stored collection)."""
        return self.run_prepared(self.initializer.prepare(fighters))

    def run_prepared(self, prepared: PreparedDraft) -> DraftResult:
        """Allocate an already classified and ranked draft."""
        result = DraftResult(ranked=prepared.ranked, slots=prepared.slots)

        if prepared.is_degenerate:
            logger.info(
                "Nothing to draft (%d fighters, %d teams)",
                len(prepared.ranked),
                len(prepared.slots),
            )
            result.completed_at = datetime.now().isoformat()
            return result

        allocation = allocate(prepared.ranked, prepared.slots)
        result.picks = allocation.picks
        result.completed_at = datetime.now().isoformat()

        for pick in allocation.picks:
            logger.debug(
                "Pick %d: %s selects %s",
                pick.pick_number,
                pick.team_name,
                pick.fighter.display_name,
            )
        logger.info(
            "Draft complete: %d picks across %d teams",
            result.total_picks,
            len(result.slots),
        )
        return result

    def estimate(self, config: DraftConfig, fighters=None) -> DraftEstimate:
        """Estimate a live run of the current pool under *config*."""
        prepared = self.initializer.prepare(fighters)
        return estimate_draft(len(prepared.ranked), config)
