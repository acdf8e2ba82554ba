"""Draft initialization - builds the ranked pool and team slots for a run."""

from dataclasses import dataclass, field
import logging
from typing import Dict, Hashable, List, Optional

from src.draft_manager.draft_rules import create_draft_slots
from src.draft_manager.draft_state import DraftSlot
from src.draft_manager.power_ranker import PowerRanker
from src.fighter_pool.classification import classify_fighters
from src.fighter_pool.models import Fighter
from src.fighter_pool.store import JsonStore, load_fighters

logger = logging.getLogger(__name__)


@dataclass
class PreparedDraft:
    """Everything a draft run starts from."""

    ranked: List[Fighter]
    slots: List[DraftSlot]
    power: Dict[Hashable, float] = field(default_factory=dict)

    @property
    def is_degenerate(self) -> bool:
        """True when there is nothing to draft or nobody to draft into."""
        return not self.ranked or not self.slots

    def power_of(self, fighter: Fighter) -> Optional[float]:
        return self.power.get(fighter.fighter_id)


class DraftInitializer:
    """Loads fighters, classifies them, ranks the pool and orders the teams."""

    def __init__(
        self,
        store: Optional[JsonStore] = None,
        ranker: Optional[PowerRanker] = None,
    ):
        self.store = store
        self.ranker = ranker or PowerRanker()

    def load_fighters(self) -> List:
        """Raw fighter records from the store ([] without a store)."""
        if self.store is None:
            return []
        return load_fighters(self.store)

    def prepare(self, fighters=None) -> PreparedDraft:
        """Classify and rank *fighters* (or the stored collection).

        Args:
            fighters: Raw records or Fighter objects. When None, the
                collection is read from the store.

        Returns:
            PreparedDraft with the ranked pool and slots ordered by size.
        """
        if fighters is None:
            fighters = self.load_fighters()

        classified = classify_fighters(fighters)
        ranked_pairs = self.ranker.rank_with_scores(classified.pool)
        slots = create_draft_slots(classified.roster_groups)

        prepared = PreparedDraft(
            ranked=[fighter for fighter, _ in ranked_pairs],
            slots=slots,
            power={fighter.fighter_id: score for fighter, score in ranked_pairs},
        )

        logger.info(
            "Prepared draft: %d pool fighters, %d teams",
            len(prepared.ranked),
            len(prepared.slots),
        )
        return prepared
