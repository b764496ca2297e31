from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Time source for poll deadlines and token expiry.

    ``now`` must return timezone-aware datetimes so persisted expiries compare
    correctly across restarts.
    """

    def now(self) -> datetime: ...

    def sleep(self, duration: float) -> None: ...
