"""Draft events and a small synchronous publish/subscribe bus."""

from dataclasses import dataclass
import logging
from typing import Callable, ClassVar, Dict, List, Optional, Union

from src.draft_manager.draft_state import DraftResult, DraftSlot
from src.fighter_pool.models import Fighter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitEvent:
    """Fired once before the first pick."""

    kind: ClassVar[str] = "init"

    ranked_pool: List[Fighter]
    draft_slots: List[DraftSlot]


@dataclass(frozen=True)
class PickEvent:
    """Fired right after every pick."""

    kind: ClassVar[str] = "pick"

    pick_number: int  # 1-based, across all teams
    slot: DraftSlot
    fighter: Fighter
    remaining: int


@dataclass(frozen=True)
class CompleteEvent:
    """Fired once when the run ends, finished or cancelled."""

    kind: ClassVar[str] = "complete"

    result: DraftResult


DraftEvent = Union[InitEvent, PickEvent, CompleteEvent]
Handler = Callable[[DraftEvent], None]


class DraftEventBus:
    """Delivers draft events to subscribers.

    Catch-all subscribers run first, then subscribers of the event's kind,
    each group in subscription order.

    Delivery is synchronous: ``publish`` returns after every handler ran.
    A failing handler is logged and does not stop the draft.
    """

    def __init__(self):
        self._handlers: Dict[Optional[str], List[Handler]] = {}

    def subscribe(self, handler: Handler, kind: Optional[str] = None) -> Callable[[], None]:
        """Register *handler* for one event kind (or all when None).

        Returns:
            A callable that removes the subscription.
        """
        self._handlers.setdefault(kind, []).append(handler)

        def unsubscribe():
            handlers = self._handlers.get(kind, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def publish(self, event: DraftEvent):
        for handler in list(self._handlers.get(None, [])) + list(
            self._handlers.get(event.kind, [])
        ):
            try:
                handler(event)
            except Exception:
                logger.exception("Draft event handler failed on %s event", event.kind)
