"""Team fit scoring for the live draft board.

Recommends, among the fighters currently displayed at the top of the board,
the one that best covers the stats the team on the clock is weakest in.
"""

from typing import Dict, Optional, Sequence

from src.fighter_pool.models import STAT_NAMES, Fighter
from src.simulation_engine.config import FIT_WINDOW, STAT_CEILING
from src.simulation_engine.models import FitRecommendation


def need_vector(picks: Sequence[Fighter]) -> Dict[str, float]:
    """Unfilled headroom per stat for a team's picks so far.

    Formula::

        need[stat] = max(0, 100 - mean(stat over picks))

    A team with no picks has a mean of 0 for every stat.
    """
    needs = {}
    for stat in STAT_NAMES:
        if picks:
            average = sum(f.get_stat(stat) for f in picks) / len(picks)
        else:
            average = 0.0
        needs[stat] = max(0.0, STAT_CEILING - average)
    return needs


def normalize_needs(needs: Dict[str, float]) -> Dict[str, float]:
    """Scale needs to sum to 1; equal weights when nothing is needed."""
    total = sum(needs.values())
    if total <= 0:
        return {stat: 1.0 / len(needs) for stat in needs}
    return {stat: value / total for stat, value in needs.items()}


def fit_score(fighter: Fighter, weights: Dict[str, float]) -> float:
    return sum(
        weight * (fighter.get_stat(stat) / STAT_CEILING)
        for stat, weight in weights.items()
    )


def best_fit(
    candidates: Sequence[Fighter],
    picks: Sequence[Fighter],
    window: int = FIT_WINDOW,
    team_name: Optional[str] = None,
) -> Optional[FitRecommendation]:
    """Highest-scoring fighter among the first *window* candidates.

    The earliest candidate wins a tie. Returns None for an empty window.
    """
    shortlist = list(candidates[:window])
    if not shortlist:
        return None

    weights = normalize_needs(need_vector(picks))
    best = None
    for fighter in shortlist:
        score = fit_score(fighter, weights)
        if best is None or score > best.score:
            best = FitRecommendation(fighter=fighter, score=score, team_name=team_name)
    return best
