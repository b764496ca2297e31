from typing import Optional

from fitpulse.config.settings import FitbitSettings
from fitpulse.core.endpoints import heart_rate_url
from fitpulse.core.exceptions import ChannelClosedError, StateStoreError
from fitpulse.core.polling.backoff import BackoffSchedule
from fitpulse.core.polling.state import PollState
from fitpulse.core.polling.tokens import TokenManager, non_blank
from fitpulse.core.polling.worker import FetchWorker
from fitpulse.core.ports.clock import Clock
from fitpulse.core.ports.dispatcher import Dispatcher
from fitpulse.core.ports.logger import Logger
from fitpulse.core.ports.token_state import TokenState
from fitpulse.core.schema.fetch import FetchFailure, FetchResult, FetchSuccess
from fitpulse.core.schema.token import TokenCache

RATE_LIMITED_STATUS = 429


class PollScheduler:
    """Per-device polling state machine driven by the host's tick.

    ``update`` is the only mutator and must be called from a single thread.
    Fetches run through ``dispatcher``; their outcomes are applied at the start
    of the next ``update`` that finds them ready.
    """

    def __init__(
        self,
        logger: Logger,
        clock: Clock,
        worker: FetchWorker,
        dispatcher: Dispatcher,
        *,
        token_state: TokenState | None = None,
        device_id: str = "default",
    ) -> None:
        self._logger = logger
        self._clock = clock
        self._worker = worker
        self._dispatcher = dispatcher
        self._token_state = token_state
        self._device_id = device_id
        self._state = PollState(
            backoff=BackoffSchedule(clock.now()),
            tokens=TokenManager(self._load_tokens()),
        )

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def device_id(self) -> str:
        return self._device_id

    def last_rate(self) -> Optional[int]:
        return self._state.last_rate

    def update(self, config: FitbitSettings, watch_visible: bool) -> None:
        state = self._state
        self._drain()

        if not watch_visible:
            state.last_watch_visible = False
            return

        now = self._clock.now()
        if not state.last_watch_visible:
            state.backoff.reset(now)
            state.last_watch_visible = True

        url = heart_rate_url(non_blank(config.user_id))
        request = state.tokens.build_request(config, url)

        if not state.backoff.is_due(now):
            return
        if state.pending is not None:
            return

        interval = state.backoff.advance(now)
        if request.access_token is None and not request.can_refresh:
            self._logger.warning(
                "Fitbit poll skipped, no access token and refresh is not possible",
                device_id=self._device_id,
                status=0,
            )
            return

        self._logger.debug(
            "Fitbit poll attempt",
            device_id=self._device_id,
            next_poll_in=interval.total_seconds(),
        )
        worker = self._worker
        state.pending = self._dispatcher.spawn(lambda: worker.run(request))

    def _drain(self) -> None:
        state = self._state
        if state.pending is None:
            return
        try:
            result = state.pending.try_receive()
        except ChannelClosedError:
            state.pending = None
            self._logger.debug(
                "Fitbit fetch ended without a result",
                device_id=self._device_id,
            )
            return
        if result is None:
            return

        state.pending = None
        self._apply(result)

    def _apply(self, result: FetchResult) -> None:
        state = self._state
        if result.token_update is not None:
            state.tokens.apply(result.token_update)
            self._store_tokens()

        if isinstance(result, FetchSuccess):
            state.last_rate = result.rate
            self._logger.debug(
                "Fitbit poll success",
                device_id=self._device_id,
                rate=result.rate,
            )
            return

        assert isinstance(result, FetchFailure)
        if result.status == RATE_LIMITED_STATUS:
            state.backoff.rate_limited(self._clock.now())
            self._logger.warning(
                "Fitbit poll rate limited, backing off",
                device_id=self._device_id,
                next_poll_at=state.next_poll_at.isoformat(),
                retry_after=(
                    result.retry_after.isoformat() if result.retry_after else None
                ),
            )
            return

        self._logger.warning(
            "Fitbit poll failed",
            device_id=self._device_id,
            error=result.message,
            status=result.status,
        )

    def _load_tokens(self) -> TokenCache | None:
        if self._token_state is None:
            return None
        try:
            return self._token_state.load(self._device_id)
        except (StateStoreError, OSError) as error:
            self._logger.warning(
                "Fitbit token state unreadable, starting without cached tokens",
                device_id=self._device_id,
                error=str(error),
            )
            return None

    def _store_tokens(self) -> None:
        if self._token_state is None:
            return
        try:
            self._token_state.store(self._device_id, self._state.tokens.cache)
        except (StateStoreError, OSError) as error:
            self._logger.warning(
                "Fitbit token state not persisted",
                device_id=self._device_id,
                error=str(error),
            )
