from src.simulation_engine.fit_scoring import (
    best_fit,
    fit_score,
    need_vector,
    normalize_needs,
)
from src.simulation_engine.models import ContestEvent, FitRecommendation, TickReport
from src.simulation_engine.volatility import EVENTS, VolatilityEngine

__all__ = [
    "ContestEvent",
    "EVENTS",
    "FitRecommendation",
    "TickReport",
    "VolatilityEngine",
    "best_fit",
    "fit_score",
    "need_vector",
    "normalize_needs",
]
