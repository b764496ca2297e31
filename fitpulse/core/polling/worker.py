from dataclasses import replace
from typing import Optional

from fitpulse.core.exceptions import (
    CredentialsMissingError,
    SourceAuthenticationError,
    SourceError,
    SourceRateLimitError,
)
from fitpulse.core.ports.clock import Clock
from fitpulse.core.ports.heart_rate_source import HeartRateSource
from fitpulse.core.ports.logger import Logger
from fitpulse.core.schema.fetch import (
    FetchFailure,
    FetchRequest,
    FetchResult,
    FetchSuccess,
    TokenUpdate,
)


class FetchWorker:
    """One request cycle: optional refresh, GET, at most one retry on 401.

    Runs off the calling thread and never touches scheduler state; everything
    it needs arrives in the ``FetchRequest`` snapshot and everything it learns
    leaves in the returned ``FetchResult``.
    """

    def __init__(
        self,
        source: HeartRateSource,
        clock: Clock,
        logger: Logger,
    ) -> None:
        self._source = source
        self._clock = clock
        self._logger = logger

    def run(self, request: FetchRequest) -> FetchResult:
        token_update: Optional[TokenUpdate] = None
        try:
            token = request.access_token
            if request.can_refresh and (
                token is None or request.is_expired(self._clock.now())
            ):
                token_update = self._refresh(request, None)
                token = token_update.access_token

            if token is None:
                raise CredentialsMissingError("Fitbit access token is missing")

            try:
                rate = self._source.fetch_latest_rate(request.url, token)
                return FetchSuccess(rate=rate, token_update=token_update)
            except SourceAuthenticationError as error:
                if not request.can_refresh:
                    raise
                self._logger.debug(
                    "Fitbit request unauthorized, refreshing token",
                    error=str(error),
                )

            token_update = self._refresh(request, token_update)
            try:
                rate = self._source.fetch_latest_rate(
                    request.url, token_update.access_token
                )
            except SourceError as error:
                self._logger.debug(
                    "Fitbit poll failed after refresh",
                    error=str(error),
                    status=error.status,
                )
                raise
            return FetchSuccess(rate=rate, token_update=token_update)
        except SourceError as error:
            return FetchFailure(
                message=error.message,
                status=error.status,
                token_update=token_update,
                retry_after=(
                    error.retry_after
                    if isinstance(error, SourceRateLimitError)
                    else None
                ),
            )

    def _refresh(
        self, request: FetchRequest, previous: Optional[TokenUpdate]
    ) -> TokenUpdate:
        """Refresh with the newest refresh token this cycle has seen.

        Refresh tokens are single-use, so a second refresh in the same cycle
        must present the one rotated in by the first.
        """
        refresh_token = request.refresh_token
        if previous is not None and previous.refresh_token is not None:
            refresh_token = previous.refresh_token
        assert refresh_token is not None
        assert request.client_id is not None
        assert request.client_secret is not None
        update = self._source.refresh_access_token(
            refresh_token,
            request.client_id,
            request.client_secret,
        )
        if update.refresh_token is None and previous is not None:
            update = replace(update, refresh_token=previous.refresh_token)
        return update
