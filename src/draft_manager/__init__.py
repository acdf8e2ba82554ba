from src.draft_manager.draft_controller import (
    AllocationResult,
    DraftController,
    allocate,
    estimate_draft,
)
from src.draft_manager.draft_export import DraftExporter, build_export
from src.draft_manager.draft_initializer import DraftInitializer, PreparedDraft
from src.draft_manager.draft_rules import DraftRules, create_draft_slots
from src.draft_manager.draft_state import (
    DraftConfig,
    DraftResult,
    DraftSlot,
    Pick,
)
from src.draft_manager.events import (
    CompleteEvent,
    DraftEventBus,
    InitEvent,
    PickEvent,
)
from src.draft_manager.live_draft import (
    CancellationToken,
    LiveDraftOrchestrator,
    LiveDraftSession,
)
from src.draft_manager.power_ranker import PowerRanker, rank_pool

__all__ = [
    "AllocationResult",
    "CancellationToken",
    "CompleteEvent",
    "DraftConfig",
    "DraftController",
    "DraftEventBus",
    "DraftExporter",
    "DraftInitializer",
    "DraftResult",
    "DraftRules",
    "DraftSlot",
    "InitEvent",
    "LiveDraftOrchestrator",
    "LiveDraftSession",
    "Pick",
    "PickEvent",
    "PowerRanker",
    "PreparedDraft",
    "allocate",
    "build_export",
    "create_draft_slots",
    "estimate_draft",
    "rank_pool",
]
