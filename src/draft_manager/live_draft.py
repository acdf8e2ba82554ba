"""Live draft - the bucketed allocation run one pick at a time on a clock.

Between picks the volatility engine keeps shuffling the board on its own
randomized cadence. If an override query is wired in, each pick takes the
fighter the query names (normally the head of the shuffled board) instead
of the next statically ranked one.
"""

import asyncio
import contextlib
from datetime import datetime
import logging
import random
from typing import Callable, Hashable, List, Optional, Set

from src.draft_manager.draft_initializer import DraftInitializer, PreparedDraft
from src.draft_manager.draft_rules import DraftRules
from src.draft_manager.draft_state import DraftConfig, DraftResult, DraftSlot, Pick
from src.draft_manager.events import CompleteEvent, DraftEventBus, InitEvent, PickEvent
from src.fighter_pool.models import Fighter
from src.simulation_engine.config import TICK_INTERVAL_RANGE
from src.simulation_engine.models import TickReport
from src.simulation_engine.volatility import VolatilityEngine

logger = logging.getLogger(__name__)

OverrideQuery = Callable[[], Optional[Hashable]]


class CancellationToken:
    """Single cancel handle shared by every suspension in a live run."""

    def __init__(self):
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self):
        self._event.set()

    async def sleep(self, seconds: float) -> bool:
        """Suspend for *seconds* or until cancelled.

        Returns:
            True if the token was cancelled.
        """
        if seconds <= 0:
            return self.cancelled
        try:
            await asyncio.wait_for(self._event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return False
        return True


class LiveDraftSession:
    """All mutable state of one live run.

    ``remaining`` starts as the static ranked order; every pick removes the
    chosen fighter from wherever it sits, so a fighter passed over by an
    override stays available for later picks.
    """

    def __init__(self, prepared: PreparedDraft, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.ranked: List[Fighter] = list(prepared.ranked)
        self.slots: List[DraftSlot] = prepared.slots
        self.remaining: List[Fighter] = list(prepared.ranked)
        self.picked_ids: Set[Hashable] = set()
        self.picks: List[Pick] = []
        self.token = CancellationToken()
        self.volatility = VolatilityEngine(prepared.ranked, rng=self.rng)
        self.closed = False

    @property
    def cancelled(self) -> bool:
        return self.token.cancelled

    def cancel(self):
        """End the run: stops pick sequencing and the volatility ticker."""
        self.token.cancel()
        self.volatility.stop()

    def close(self):
        self.closed = True
        self.volatility.stop()

    def top_candidate_id(self) -> Optional[Hashable]:
        """Head of the live (shuffled) board."""
        return self.volatility.top_candidate_id()

    def tick(self) -> Optional[TickReport]:
        if self.closed or self.cancelled:
            return None
        return self.volatility.tick()

    def select(self, override_id: Optional[Hashable] = None) -> Fighter:
        """Next fighter: the override if it names an undrafted pool fighter,
        otherwise the best remaining static-ranked fighter."""
        if override_id is not None and override_id not in self.picked_ids:
            for fighter in self.remaining:
                if fighter.fighter_id == override_id:
                    return fighter
        return self.remaining[0]

    def record_pick(self, slot: DraftSlot, fighter: Fighter) -> Pick:
        for index, candidate in enumerate(self.remaining):
            if candidate is fighter:
                del self.remaining[index]
                break
        slot.add_pick(fighter)
        self.picked_ids.add(fighter.fighter_id)
        self.volatility.remove(fighter.fighter_id)

        pick = Pick.create(len(self.picks) + 1, slot.name, fighter)
        self.picks.append(pick)
        return pick


class LiveDraftOrchestrator:
    """Runs a draft in real time, publishing init/pick/complete events."""

    def __init__(
        self,
        config: Optional[DraftConfig] = None,
        initializer: Optional[DraftInitializer] = None,
        event_bus: Optional[DraftEventBus] = None,
        override: Optional[OverrideQuery] = None,
        follow_volatility: bool = False,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or DraftConfig()
        self.initializer = initializer or DraftInitializer()
        self.events = event_bus or DraftEventBus()
        self.override = override
        self.follow_volatility = follow_volatility
        self.rng = rng
        self.session: Optional[LiveDraftSession] = None

    def cancel(self):
        if self.session is not None:
            self.session.cancel()

    def _override_query(self, session: LiveDraftSession) -> Optional[OverrideQuery]:
        if self.override is not None:
            return self.override
        if self.follow_volatility:
            return session.top_candidate_id
        return None

    async def _run_ticker(self, session: LiveDraftSession):
        """Tick the volatility engine on a randomized cadence until closed."""
        while not session.closed and not session.cancelled:
            interval = session.rng.uniform(*TICK_INTERVAL_RANGE)
            if await session.token.sleep(interval):
                return
            session.tick()

    async def run(self, fighters=None) -> DraftResult:
        """Run the live draft to completion (or cancellation).

        Args:
            fighters: Raw records or Fighter objects; read from the
                initializer's store when None.
        """
        return await self.run_prepared(self.initializer.prepare(fighters))

    async def run_prepared(self, prepared: PreparedDraft) -> DraftResult:
        """Run the live draft from an already classified and ranked draft."""
        session = LiveDraftSession(prepared, rng=self.rng)
        self.session = session
        result = DraftResult(ranked=prepared.ranked, slots=prepared.slots)

        self.events.publish(
            InitEvent(ranked_pool=list(prepared.ranked), draft_slots=list(prepared.slots))
        )

        if prepared.is_degenerate:
            logger.info(
                "Nothing to draft (%d fighters, %d teams)",
                len(prepared.ranked),
                len(prepared.slots),
            )
            session.close()
            return self._finish(result, session)

        override = self._override_query(session)
        session.volatility.set_on_clock(DraftRules.next_slot(session.slots))
        ticker = asyncio.create_task(self._run_ticker(session))
        try:
            start_delay = self.config.start_delay_seconds()
            if start_delay > 0:
                logger.info("Draft begins in %.1f s", start_delay)
                await session.token.sleep(start_delay)

            await self._pick_loop(session, override)
        finally:
            session.close()
            ticker.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await ticker

        return self._finish(result, session)

    async def _pick_loop(self, session: LiveDraftSession, override: Optional[OverrideQuery]):
        delay = self.config.pick_delay_seconds
        while session.remaining and not session.cancelled:
            for slot in DraftRules.bucket(session.slots):
                if not session.remaining or session.cancelled:
                    break

                fighter = session.select(override() if override is not None else None)
                pick = session.record_pick(slot, fighter)
                session.volatility.set_on_clock(DraftRules.next_slot(session.slots))

                self.events.publish(
                    PickEvent(
                        pick_number=pick.pick_number,
                        slot=slot,
                        fighter=fighter,
                        remaining=len(session.remaining),
                    )
                )
                logger.info(
                    "#%d %s select %s (%d left)",
                    pick.pick_number,
                    slot.name,
                    fighter.display_name,
                    len(session.remaining),
                )

                if await session.token.sleep(delay):
                    logger.info("Live draft cancelled after %d picks", len(session.picks))
                    return

    def _finish(self, result: DraftResult, session: LiveDraftSession) -> DraftResult:
        result.picks = list(session.picks)
        result.cancelled = session.cancelled
        result.completed_at = datetime.now().isoformat()
        self.events.publish(CompleteEvent(result=result))
        return result
