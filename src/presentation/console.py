"""Console presenter - renders draft events as plain text."""

import sys
from typing import Dict, List, Optional, TextIO

from src.draft_manager.draft_state import DraftResult
from src.draft_manager.events import CompleteEvent, DraftEventBus, InitEvent, PickEvent
from src.presentation.countdown import Countdown
from src.presentation.table_sort import sort_rows


def ranking_rows(ranked, power: Optional[Dict] = None) -> List[Dict]:
    """Table rows for the ranked pool."""
    power = power or {}
    return [
        {
            "rank": index,
            "name": fighter.display_name,
            "power": round(power.get(fighter.fighter_id, 0.5), 4),
            "record": f"{fighter.wins:g}-{fighter.losses:g}-{fighter.draws:g}",
            "str": fighter.strength,
            "spd": fighter.speed,
            "end": fighter.endurance,
            "tec": fighter.technique,
        }
        for index, fighter in enumerate(ranked, start=1)
    ]


def format_table(rows: List[Dict]) -> str:
    if not rows:
        return "(empty)"
    columns = list(rows[0])
    widths = {
        col: max(len(col), *(len(str(row[col])) for row in rows)) for col in columns
    }
    lines = ["  ".join(col.ljust(widths[col]) for col in columns)]
    for row in rows:
        lines.append("  ".join(str(row[col]).ljust(widths[col]) for col in columns))
    return "\n".join(lines)


class ConsolePresenter:
    """Prints the ranking, a live pick log, and the final team boards."""

    def __init__(
        self,
        pick_delay_seconds: float = 0,
        stream: Optional[TextIO] = None,
        sort_by: Optional[str] = None,
        power: Optional[Dict] = None,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.sort_by = sort_by
        self.power = power or {}
        self.countdown = Countdown(pick_delay_seconds * 1000)
        self.log: List[str] = []

    def attach(self, bus: DraftEventBus):
        bus.subscribe(self.on_init, InitEvent.kind)
        bus.subscribe(self.on_pick, PickEvent.kind)
        bus.subscribe(self.on_complete, CompleteEvent.kind)

    def _write(self, text: str):
        print(text, file=self.stream)

    def on_init(self, event: InitEvent):
        rows = ranking_rows(event.ranked_pool, self.power)
        if self.sort_by:
            rows = sort_rows(rows, self.sort_by)
        self._write("Draft pool ranking")
        self._write(format_table(rows))
        self._write("")
        for slot in event.draft_slots:
            self._write(f"{slot.name} ({slot.pre_draft_count})")
        self._write("")
        self.countdown.set_headline("", "")
        self.countdown.reset()

    def on_pick(self, event: PickEvent):
        line = (
            f"#{event.pick_number} {event.slot.name} select "
            f"{event.fighter.display_name} ({event.remaining} left)"
        )
        self.log.insert(0, line)
        self.countdown.set_headline(
            event.fighter.display_name,
            f"{event.slot.name} Round {event.pick_number} pick",
        )
        self.countdown.reset()
        self._write(line)

    def on_complete(self, event: CompleteEvent):
        self.countdown.stop()
        self._write("")
        self._write(self.render_results(event.result))

    @staticmethod
    def render_results(result: DraftResult) -> str:
        lines = ["Round-robin draft results"]
        if result.cancelled:
            lines[0] += " (cancelled)"
        for slot in result.slots:
            lines.append(
                f"{slot.name} ({slot.current_size}) "
                f"before: {slot.pre_draft_count} • picks: {len(slot.picks)}"
            )
            for fighter in slot.picks:
                lines.append(f"  - {fighter.display_name}")
        return "\n".join(lines)
