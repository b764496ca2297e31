import pytest
import requests

from fitpulse.core.exceptions import TransportError
from fitpulse.infra.fitbit.client import FitbitClient


class _FakeResponse:
    def __init__(self, status_code: int, content: bytes, headers: dict[str, str]) -> None:
        self.status_code = status_code
        self.content = content
        self.headers = headers


class _FakeSession:
    def __init__(self, response: _FakeResponse | None = None, error: Exception | None = None) -> None:
        self._response = response
        self._error = error
        self.calls: list[tuple[str, str, dict]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs):  # noqa: ANN003, ANN201
        self.calls.append((method, url, kwargs))
        if self._error is not None:
            raise self._error
        return self._response

    def close(self) -> None:
        self.closed = True


class TestFitbitClient:
    def test_get_returns_status_and_body(self) -> None:
        session = _FakeSession(_FakeResponse(200, b'{"ok": true}', {"Content-Type": "application/json"}))
        client = FitbitClient(timeout=3.0, session=session)

        response = client.get("https://example.test/hr", {"Accept": "application/json"})

        assert response.status == 200
        assert response.body == b'{"ok": true}'
        method, url, kwargs = session.calls[0]
        assert method == "GET"
        assert kwargs["timeout"] == 3.0
        assert kwargs["headers"] == {"Accept": "application/json"}
        assert kwargs["allow_redirects"] is True

    def test_error_statuses_are_returned_not_raised(self) -> None:
        session = _FakeSession(_FakeResponse(503, b"unavailable", {}))
        client = FitbitClient(session=session)

        response = client.get("https://example.test/hr", {})

        assert response.status == 503

    def test_post_sends_basic_auth_and_form(self) -> None:
        session = _FakeSession(_FakeResponse(200, b"{}", {}))
        client = FitbitClient(session=session)

        client.post(
            "https://example.test/token",
            auth=("id", "secret"),
            data={"grant_type": "refresh_token"},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        method, _, kwargs = session.calls[0]
        assert method == "POST"
        assert kwargs["auth"] == ("id", "secret")
        assert kwargs["data"] == {"grant_type": "refresh_token"}

    @pytest.mark.parametrize(
        "error",
        [
            requests.ConnectionError("refused"),
            requests.Timeout("timed out"),
            requests.TooManyRedirects("loop"),
        ],
    )
    def test_connection_failures_become_transport_errors(self, error: Exception) -> None:
        client = FitbitClient(session=_FakeSession(error=error))

        with pytest.raises(TransportError) as excinfo:
            client.get("https://example.test/hr", {})

        assert excinfo.value.status == 0

    def test_context_manager_closes_session(self) -> None:
        session = _FakeSession(_FakeResponse(200, b"", {}))

        with FitbitClient(session=session):
            pass

        assert session.closed
