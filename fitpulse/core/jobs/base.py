from abc import ABC, abstractmethod
from typing import final

from fitpulse.core.exceptions import FitpulseError, SourceError
from fitpulse.core.ports.clock import Clock
from fitpulse.core.ports.logger import Logger


class BaseJob(ABC):
    """Fixed-rate tick loop.

    ``execute_once`` runs once per tick; domain errors are logged and the loop
    keeps going. ``max_ticks`` bounds the loop for one-shot runs.
    """

    def __init__(
        self,
        logger: Logger,
        tick_interval: float,
        clock: Clock,
        *,
        max_ticks: int | None = None,
    ) -> None:
        self._logger = logger
        self._tick_interval = tick_interval
        self._clock = clock
        self._max_ticks = max_ticks
        self._ticks = 0
        self._running = False

    @property
    def ticks(self) -> int:
        return self._ticks

    @final
    def run(self) -> None:
        job_name = self.__class__.__name__
        self._running = True
        self._ticks = 0
        self._logger.info("Job starting", job=job_name)
        try:
            self.setup()
            while self._running and self.should_continue():
                self._ticks += 1
                try:
                    self.execute_once()
                except FitpulseError as error:
                    self.handle_error(error)
                if self._tick_interval > 0:
                    self._clock.sleep(self._tick_interval)
        finally:
            try:
                self.teardown()
            finally:
                self._running = False
                self._logger.info("Job stopping", job=job_name, ticks=self._ticks)

    @abstractmethod
    def setup(self) -> None: ...

    @abstractmethod
    def execute_once(self) -> None: ...

    def teardown(self) -> None:
        return

    def handle_error(self, error: FitpulseError) -> None:
        self._logger.exception(
            "Job error",
            error=str(error),
            status=error.status if isinstance(error, SourceError) else None,
            job=self.__class__.__name__,
        )

    def should_continue(self) -> bool:
        return self._max_ticks is None or self._ticks < self._max_ticks

    def stop(self) -> None:
        self._running = False
