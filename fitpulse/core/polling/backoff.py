from datetime import datetime, timedelta
from enum import Enum
from typing import Sequence, Tuple

POLL_INTERVALS: Tuple[timedelta, ...] = (
    timedelta(seconds=1),
    timedelta(seconds=3),
    timedelta(seconds=10),
    timedelta(seconds=30),
)
RATE_LIMIT_COOLDOWN = timedelta(seconds=60)


class BackoffPhase(Enum):
    IDLE = "idle"
    BACKING_OFF = "backing_off"
    RATE_LIMITED = "rate_limited"


class BackoffSchedule:
    """Cursor over a fixed interval sequence with a rate-limit override.

    ``advance`` consumes the interval at the cursor and moves it forward,
    clamping at the last entry. ``rate_limited`` jumps straight to the last
    entry and pushes the next poll out by the cool-down, whatever the cursor
    was. ``reset`` makes the next poll due immediately.
    """

    def __init__(
        self,
        now: datetime,
        intervals: Sequence[timedelta] = POLL_INTERVALS,
        cooldown: timedelta = RATE_LIMIT_COOLDOWN,
    ) -> None:
        if not intervals:
            raise ValueError("Backoff schedule needs at least one interval")
        self._intervals = tuple(intervals)
        self._cooldown = cooldown
        self._next_poll_at = now
        self._index = 0
        self._phase = BackoffPhase.IDLE

    @property
    def next_poll_at(self) -> datetime:
        return self._next_poll_at

    @property
    def next_interval_index(self) -> int:
        return self._index

    @property
    def last_index(self) -> int:
        return len(self._intervals) - 1

    @property
    def phase(self) -> BackoffPhase:
        return self._phase

    def current_interval(self) -> timedelta:
        return self._intervals[min(self._index, self.last_index)]

    def is_due(self, now: datetime) -> bool:
        return now >= self._next_poll_at

    def advance(self, now: datetime) -> timedelta:
        interval = self.current_interval()
        self._next_poll_at = now + interval
        self._index = min(self._index + 1, self.last_index)
        self._phase = BackoffPhase.BACKING_OFF
        return interval

    def rate_limited(self, now: datetime) -> None:
        self._next_poll_at = now + self._cooldown
        self._index = self.last_index
        self._phase = BackoffPhase.RATE_LIMITED

    def reset(self, now: datetime) -> None:
        self._next_poll_at = now
        self._index = 0
        self._phase = BackoffPhase.IDLE
