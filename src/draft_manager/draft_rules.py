"""Draft order rules - smallest rosters pick first."""

from typing import Dict, List, Optional, Sequence

from src.draft_manager.draft_state import DraftSlot
from src.fighter_pool.models import Fighter


def create_draft_slots(roster_groups: Dict[str, List[Fighter]]) -> List[DraftSlot]:
    """One slot per team, ascending by current roster size.

    The sort is stable, so equally sized teams keep their collection order.
    """
    slots = [
        DraftSlot(name=name, members=list(members))
        for name, members in roster_groups.items()
    ]
    return sorted(slots, key=lambda slot: slot.pre_draft_count)


class DraftRules:
    """Bucketed round robin: only the currently smallest teams may pick.

    Every bucket is the set of slots sharing the minimum ``current_size``,
    visited in slot order; each receives one fighter before sizes are
    recomputed.
    """

    @staticmethod
    def min_size(slots: Sequence[DraftSlot]) -> int:
        return min(slot.current_size for slot in slots)

    @classmethod
    def bucket(cls, slots: Sequence[DraftSlot]) -> List[DraftSlot]:
        """Slots tied for the smallest current size, in slot order."""
        if not slots:
            return []
        smallest = cls.min_size(slots)
        return [slot for slot in slots if slot.current_size == smallest]

    @classmethod
    def next_slot(cls, slots: Sequence[DraftSlot]) -> Optional[DraftSlot]:
        """The slot at the head of the current bucket, if any."""
        bucket = cls.bucket(slots)
        return bucket[0] if bucket else None

    @classmethod
    def is_eligible(cls, slot: DraftSlot, slots: Sequence[DraftSlot]) -> bool:
        """Whether *slot* is (or ties for) the smallest team right now."""
        return bool(slots) and slot.current_size == cls.min_size(slots)

    @staticmethod
    def size_spread(slots: Sequence[DraftSlot]) -> int:
        """Largest minus smallest current size (0 for no slots)."""
        if not slots:
            return 0
        sizes = [slot.current_size for slot in slots]
        return max(sizes) - min(sizes)
