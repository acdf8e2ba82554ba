"""Volatility engine for the live draft board.

While the draft clock runs, the board of undrafted fighters is shuffled by
small random "events": every tick all ratings decay toward zero, a few
random pairs go head to head on the event's stat, winners gain and losers
drop a fixed step, and the board is re-sorted by rating plus a little
jitter. The head of the board is what a live override would pick next.

The engine keeps its own ratings and never touches power scores.
"""

import logging
import random
from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Optional, Tuple

from src.fighter_pool.models import Fighter
from src.simulation_engine.config import (
    CONTESTS_PER_TICK,
    DECAY_FACTOR,
    EVENT_CATALOGUE,
    FIT_WINDOW,
    INITIAL_RATING_SPACING,
    JITTER,
    RATING_STEP,
)
from src.simulation_engine.fit_scoring import best_fit
from src.simulation_engine.models import ContestEvent, FitRecommendation, TickReport

if TYPE_CHECKING:
    from src.draft_manager.draft_state import DraftSlot

logger = logging.getLogger(__name__)

EVENTS = [ContestEvent(name, stat) for name, stat in EVENT_CATALOGUE.items()]


class VolatilityEngine:
    """Randomly perturbs the displayed order of the undrafted pool."""

    def __init__(
        self,
        fighters: Iterable[Fighter] = (),
        rng: Optional[random.Random] = None,
    ):
        self.rng = rng or random.Random()
        self.display_order: List[Fighter] = list(fighters)
        self.ratings: Dict[Hashable, float] = {}
        self.on_clock: Optional["DraftSlot"] = None
        self.recommendation: Optional[FitRecommendation] = None
        self.stopped = False
        self.tick_count = 0
        self._seeded_for: Optional[Tuple] = None

    # ------------------------------------------------------------------
    # Board maintenance
    # ------------------------------------------------------------------

    def _order_key(self) -> Tuple:
        return tuple(f.fighter_id for f in self.display_order)

    def set_display_order(self, fighters: Iterable[Fighter]):
        """Replace the board; ratings are re-seeded on the next tick."""
        self.display_order = list(fighters)

    def remove(self, fighter_id: Hashable) -> bool:
        """Take a drafted fighter off the board."""
        for index, fighter in enumerate(self.display_order):
            if fighter.fighter_id == fighter_id:
                del self.display_order[index]
                self.ratings.pop(fighter_id, None)
                return True
        return False

    def set_on_clock(self, slot: Optional["DraftSlot"]):
        """Set the team whose needs drive the best-fit recommendation."""
        self.on_clock = slot

    def stop(self):
        """Make every later tick a no-op."""
        self.stopped = True

    def top_candidate_id(self) -> Optional[Hashable]:
        """ID of the fighter currently at the head of the board."""
        if not self.display_order:
            return None
        return self.display_order[0].fighter_id

    # ------------------------------------------------------------------
    # Rating dynamics
    # ------------------------------------------------------------------

    def ensure_seeded(self):
        """Seed ratings from the board if it changed since the last tick.

        The first fighter on the board gets the highest rating.
        """
        key = self._order_key()
        if key == self._seeded_for:
            return
        n = len(self.display_order)
        self.ratings = {
            fighter.fighter_id: (n - index) * INITIAL_RATING_SPACING
            for index, fighter in enumerate(self.display_order)
        }
        self._seeded_for = key
        logger.debug("Seeded %d ratings", n)

    def apply_decay(self, factor: float = DECAY_FACTOR):
        for fighter_id in self.ratings:
            self.ratings[fighter_id] *= factor

    def run_contest(
        self, event: ContestEvent
    ) -> Optional[Tuple[Hashable, Hashable]]:
        """Pit two random board fighters against each other.

        Returns:
            ``(winner_id, loser_id)``, or None for a tie or a board of < 2.
        """
        if len(self.display_order) < 2:
            return None
        a, b = self.rng.sample(self.display_order, 2)
        outcome = event.compare(a, b, self.rng)
        if outcome == 0:
            return None
        winner, loser = (a, b) if outcome > 0 else (b, a)
        self.ratings[winner.fighter_id] = (
            self.ratings.get(winner.fighter_id, 0.0) + RATING_STEP
        )
        self.ratings[loser.fighter_id] = (
            self.ratings.get(loser.fighter_id, 0.0) - RATING_STEP
        )
        return winner.fighter_id, loser.fighter_id

    def reorder(self):
        """Sort the board by rating plus independent jitter, best first."""
        jittered = {
            fighter.fighter_id: self.ratings.get(fighter.fighter_id, 0.0)
            + self.rng.uniform(-JITTER, JITTER)
            for fighter in self.display_order
        }
        self.display_order.sort(key=lambda f: jittered[f.fighter_id], reverse=True)
        self._seeded_for = self._order_key()

    def refresh_best_fit(self) -> Optional[FitRecommendation]:
        picks = self.on_clock.picks if self.on_clock is not None else []
        team_name = self.on_clock.name if self.on_clock is not None else None
        self.recommendation = best_fit(
            self.display_order, picks, window=FIT_WINDOW, team_name=team_name
        )
        return self.recommendation

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self) -> Optional[TickReport]:
        """Advance the board by one event. Idle when stopped or empty."""
        if self.stopped or not self.display_order:
            return None

        self.ensure_seeded()
        event = self.rng.choice(EVENTS)
        self.apply_decay()

        report = TickReport(event=event)
        if len(self.display_order) >= 2:
            for _ in range(self.rng.randint(*CONTESTS_PER_TICK)):
                result = self.run_contest(event)
                if result is not None:
                    report.results.append(result)

        self.reorder()
        report.best_fit = self.refresh_best_fit()
        report.top_candidate_id = self.top_candidate_id()
        self.tick_count += 1

        logger.debug(
            "Tick %d (%s): %d decided contests, top=%s",
            self.tick_count,
            event.name,
            len(report.results),
            report.top_candidate_id,
        )
        return report
