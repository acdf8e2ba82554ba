"""Power-score ranking of the draft pool.

Every pool fighter is matched against every other pool fighter. For a pair
(A, B) the chance that A beats B is the mean, over the stats where at least
one of them is non-zero, of ``A_stat / (A_stat + B_stat)``. A fighter's
power score is the mean of those chances against the rest of the pool.

Ties are broken by smoothed record rate, then total stats, then name.
"""

import logging
import math
from typing import List, Sequence, Tuple

from src.draft_manager.config import RECORD_PRIOR_GAMES, RECORD_PRIOR_WINS
from src.fighter_pool.models import STAT_NAMES, Fighter

logger = logging.getLogger(__name__)


def stat_prob_between(fighter_a: Fighter, fighter_b: Fighter) -> float:
    """Probability that *fighter_a* beats *fighter_b* on raw stats.

    Stats where both fighters have 0 are left out of the mean rather than
    counted as a coin flip; with no usable stat the result is exactly 0.5.
    """
    total = 0.0
    count = 0
    for stat in STAT_NAMES:
        a = fighter_a.get_stat(stat)
        b = fighter_b.get_stat(stat)
        if a + b > 0:
            total += a / (a + b)
            count += 1
    if count == 0:
        return 0.5
    return total / count


def smoothed_record_rate(fighter: Fighter) -> float:
    """Win rate with draws as half wins and one phantom win and loss.

    Formula::

        (wins + 0.5 * draws + 1) / (wins + losses + draws + 2)

    A fighter with no bouts scores exactly 0.5.
    """
    wins, losses, draws = fighter.wins, fighter.losses, fighter.draws
    return (wins + 0.5 * draws + RECORD_PRIOR_WINS) / (
        wins + losses + draws + RECORD_PRIOR_GAMES
    )


def total_stats(fighter: Fighter) -> float:
    return sum(fighter.get_stat(stat) for stat in STAT_NAMES)


def power_scores(pool: Sequence[Fighter]) -> List[float]:
    """Mean pairwise win probability of each fighter against the rest.

    Returned in the same order as *pool*. O(n²). Sums use ``math.fsum`` so
    identical fighters score identically wherever they sit in the pool.
    """
    n = len(pool)
    scores = []
    for i in range(n):
        total = math.fsum(
            stat_prob_between(pool[i], pool[j]) for j in range(n) if j != i
        )
        scores.append(total / (n - 1) if n > 1 else 0.5)
    return scores


def ranking_key(fighter: Fighter, power: float) -> Tuple[float, float, float, str]:
    """Sort key implementing the full tie-break chain (ascending sort)."""
    return (
        -power,
        -smoothed_record_rate(fighter),
        -total_stats(fighter),
        fighter.name,
    )


class PowerRanker:
    """Ranks a draft pool by power score.

    Stateless; scores are recomputed on every call so stat edits between
    runs are always picked up.
    """

    def rank_with_scores(
        self, pool: Sequence[Fighter]
    ) -> List[Tuple[Fighter, float]]:
        """Return ``(fighter, power)`` pairs, best first.

        Pools of 0 or 1 fighters come back in their given order with no
        score computed (reported as 0.5).
        """
        if len(pool) <= 1:
            return [(fighter, 0.5) for fighter in pool]

        scores = power_scores(pool)
        ranked = sorted(
            zip(pool, scores),
            key=lambda pair: ranking_key(pair[0], pair[1]),
        )
        logger.debug(
            "Ranked %d fighters; top: %s (%.4f)",
            len(ranked),
            ranked[0][0].display_name,
            ranked[0][1],
        )
        return ranked

    def rank(self, pool: Sequence[Fighter]) -> List[Fighter]:
        """Return a new list of *pool* ordered best first."""
        return [fighter for fighter, _ in self.rank_with_scores(pool)]


def rank_pool(pool: Sequence[Fighter]) -> List[Fighter]:
    """Convenience wrapper around :meth:`PowerRanker.rank`."""
    return PowerRanker().rank(pool)
