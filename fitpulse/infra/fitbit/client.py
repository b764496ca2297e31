from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

import requests

from fitpulse.core.exceptions import TransportError


@dataclass(frozen=True, slots=True)
class HttpResponse:
    status: int
    body: bytes
    headers: Mapping[str, str]


class FitbitClient:
    def __init__(
        self,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse:
        return self._request('GET', url, headers=dict(headers))

    def post(
        self,
        url: str,
        auth: Tuple[str, str],
        data: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> HttpResponse:
        return self._request(
            'POST',
            url,
            auth=auth,
            data=dict(data),
            headers=dict(headers),
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> 'FitbitClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()

    def _request(self, method: str, url: str, **kwargs) -> HttpResponse:  # noqa: ANN003
        try:
            response = self._session.request(
                method,
                url,
                timeout=self._timeout,
                allow_redirects=True,
                **kwargs,
            )
        except requests.RequestException as error:
            raise TransportError(f'{method} {url} failed: {error}') from error
        return HttpResponse(
            status=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )
