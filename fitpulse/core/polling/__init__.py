from fitpulse.core.polling.backoff import (
    POLL_INTERVALS,
    RATE_LIMIT_COOLDOWN,
    BackoffPhase,
    BackoffSchedule,
)
from fitpulse.core.polling.scheduler import PollScheduler
from fitpulse.core.polling.state import PollState
from fitpulse.core.polling.tokens import TokenManager
from fitpulse.core.polling.worker import FetchWorker

__all__ = [
    "POLL_INTERVALS",
    "RATE_LIMIT_COOLDOWN",
    "BackoffPhase",
    "BackoffSchedule",
    "PollScheduler",
    "PollState",
    "TokenManager",
    "FetchWorker",
]
