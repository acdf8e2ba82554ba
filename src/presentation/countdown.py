"""Countdown clock model for the draft banner (MM:SS.CS)."""

import time
from typing import Callable, Optional

URGENT_THRESHOLD_MS = 10_000


def format_time(ms: float) -> str:
    """Format milliseconds as ``MM:SS.CS``; negative values show as zero."""
    total = max(0, int(ms))
    minutes = total // 60000
    seconds = (total % 60000) // 1000
    centis = (total % 1000) // 10
    return f"{minutes:02d}:{seconds:02d}.{centis:02d}"


class Countdown:
    """Tracks remaining time for a fixed duration.

    Times are milliseconds; the clock is injectable for tests.
    """

    def __init__(self, duration_ms: float = 0, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.monotonic
        self.duration_ms = max(0.0, float(duration_ms))
        self.end_at: Optional[float] = None
        self.title = ""
        self.subtitle = ""

    def _now_ms(self) -> float:
        return self._clock() * 1000.0

    @property
    def running(self) -> bool:
        return self.end_at is not None and self.remaining_ms() > 0

    def set_duration(self, ms) -> None:
        try:
            self.duration_ms = max(0.0, float(ms or 0))
        except (TypeError, ValueError):
            self.duration_ms = 0.0

    def start(self) -> None:
        if self.duration_ms <= 0:
            return
        self.end_at = self._now_ms() + self.duration_ms

    def reset(self, new_duration_ms: Optional[float] = None) -> None:
        """Restart from full duration, optionally changing it first."""
        if new_duration_ms is not None:
            self.set_duration(new_duration_ms)
        self.end_at = self._now_ms() + self.duration_ms

    def stop(self) -> None:
        self.end_at = None

    def remaining_ms(self) -> float:
        if self.end_at is None:
            return 0.0
        return min(max(self.end_at - self._now_ms(), 0.0), self.duration_ms)

    def progress(self) -> float:
        """Fraction of the duration still remaining (0..1)."""
        if self.duration_ms <= 0:
            return 0.0
        return self.remaining_ms() / self.duration_ms

    def is_urgent(self) -> bool:
        return self.end_at is not None and self.remaining_ms() <= URGENT_THRESHOLD_MS

    def set_headline(self, main_text: str = "", sub_text: str = "") -> None:
        self.title = main_text or ""
        self.subtitle = (sub_text or "").upper()

    def render(self) -> str:
        """One-line text rendering of the banner."""
        parts = [p for p in (self.title, self.subtitle) if p]
        parts.append(format_time(self.remaining_ms()))
        return " | ".join(parts)
