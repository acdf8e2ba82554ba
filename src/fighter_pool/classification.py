"""Pool classification - split fighters into the draft pool and team rosters."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Dict, List

from src.fighter_pool.config import CUSTOM_MARKERS, FREE_AGENT_MARKERS
from src.fighter_pool.models import Fighter

logger = logging.getLogger(__name__)


@dataclass
class ClassifiedFighters:
    """Result of classifying a fighter collection."""

    pool: List[Fighter] = field(default_factory=list)
    roster_groups: Dict[str, List[Fighter]] = field(default_factory=dict)


def is_pool_member(fighter: Fighter) -> bool:
    """True for free agents and custom fighters.

    The affiliation is trimmed and lower-cased for the comparison only.
    """
    marker = fighter.team.strip().lower()
    is_free = marker in FREE_AGENT_MARKERS
    is_custom = fighter.is_custom or marker in CUSTOM_MARKERS
    return is_free or is_custom


def classify_fighters(fighters) -> ClassifiedFighters:
    """Partition *fighters* into the draftable pool and roster groups.

    Anything that is not a list or tuple is treated as an empty collection.
    Original order is kept inside the pool and inside every roster group;
    groups are ordered by the first appearance of their team.
    """
    result = ClassifiedFighters()
    if not isinstance(fighters, (list, tuple)):
        if fighters is not None:
            logger.warning(
                "Fighter collection is %s, not a list; treating as empty",
                type(fighters).__name__,
            )
        return result

    for entry in fighters:
        if isinstance(entry, Fighter):
            fighter = entry
        elif isinstance(entry, Mapping):
            fighter = Fighter.from_record(entry)
        else:
            logger.debug("Skipping non-record entry: %r", entry)
            continue

        if is_pool_member(fighter):
            result.pool.append(fighter)
        else:
            result.roster_groups.setdefault(fighter.team.strip(), []).append(fighter)

    logger.debug(
        "Classified %d pool fighters and %d teams",
        len(result.pool),
        len(result.roster_groups),
    )
    return result
