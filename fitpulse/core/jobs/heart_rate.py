from typing import Callable, Optional

from fitpulse.config.settings import FitbitSettings
from fitpulse.core.jobs.base import BaseJob
from fitpulse.core.polling.scheduler import PollScheduler
from fitpulse.core.ports.clock import Clock
from fitpulse.core.ports.logger import Logger

_UNREPORTED = object()


def always_visible() -> bool:
    return True


class HeartRateJob(BaseJob):
    """Host tick loop: one ``PollScheduler.update`` per tick."""

    def __init__(
        self,
        logger: Logger,
        tick_interval: float,
        clock: Clock,
        scheduler: PollScheduler,
        config: FitbitSettings,
        *,
        visibility: Callable[[], bool] = always_visible,
        on_rate: Callable[[Optional[int]], None] | None = None,
        max_ticks: int | None = None,
    ) -> None:
        super().__init__(logger, tick_interval, clock, max_ticks=max_ticks)
        self._scheduler = scheduler
        self._config = config
        self._visibility = visibility
        self._on_rate = on_rate
        self._last_reported: object = _UNREPORTED

    def setup(self) -> None:
        self._logger.info(
            "Heart rate polling initialized",
            device_id=self._scheduler.device_id,
        )

    def execute_once(self) -> None:
        self._scheduler.update(self._config, self._visibility())
        rate = self._scheduler.last_rate()
        if rate == self._last_reported:
            return
        self._last_reported = rate
        self._logger.info(
            "Heart rate changed",
            device_id=self._scheduler.device_id,
            rate=rate,
        )
        if self._on_rate is not None:
            self._on_rate(rate)
