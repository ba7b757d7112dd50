"""Tests for SheetFetcher status handling and retries."""

import pytest
import requests

from camp_schedule.errors import (
    EmptyPayloadError,
    PermanentError,
    RateLimitError,
    TransientError,
)
from camp_schedule.fetch import SheetFetcher

URL = "https://sheets.example.com/pub?output=csv"


class FakeResponse:
    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.content = body.encode("utf-8")


class FakeSession:
    """Returns (or raises) the queued outcomes in order, repeating the last one."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[tuple[str, float]] = []

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _fetcher(session: FakeSession, attempts: int = 3) -> SheetFetcher:
    return SheetFetcher(URL, timeout=5.0, attempts=attempts, retry_wait=0, session=session)


def test_returns_body_text() -> None:
    session = FakeSession(FakeResponse(200, "Day,Time\nMonday,9:00\n"))

    assert _fetcher(session).fetch() == "Day,Time\nMonday,9:00\n"
    assert session.calls == [(URL, 5.0)]


def test_body_is_decoded_as_utf8() -> None:
    session = FakeSession(FakeResponse(200, "Day,Activity\nMonday,Café crème"))

    assert "Café crème" in _fetcher(session).fetch()


def test_server_error_is_retried() -> None:
    session = FakeSession(FakeResponse(503), FakeResponse(200, "Day\nMonday"))

    assert _fetcher(session).fetch() == "Day\nMonday"
    assert len(session.calls) == 2


def test_network_error_exhausts_attempts() -> None:
    session = FakeSession(requests.ConnectionError("connection reset"))

    with pytest.raises(TransientError, match="connection reset"):
        _fetcher(session, attempts=3).fetch()
    assert len(session.calls) == 3


def test_rate_limit_is_retried_then_raised() -> None:
    session = FakeSession(FakeResponse(429))

    with pytest.raises(RateLimitError):
        _fetcher(session, attempts=2).fetch()
    assert len(session.calls) == 2


def test_not_found_is_permanent() -> None:
    session = FakeSession(FakeResponse(404))

    with pytest.raises(PermanentError, match="status: 404"):
        _fetcher(session).fetch()
    assert len(session.calls) == 1


def test_whitespace_body_is_empty_payload() -> None:
    session = FakeSession(FakeResponse(200, "  \n \n"))

    with pytest.raises(EmptyPayloadError):
        _fetcher(session).fetch()
    assert len(session.calls) == 1


def test_dropped_connection_mid_body_is_retried() -> None:
    session = FakeSession(
        requests.exceptions.ChunkedEncodingError("connection broken"),
        FakeResponse(200, "Day\nMonday"),
    )

    assert _fetcher(session).fetch() == "Day\nMonday"
    assert len(session.calls) == 2


@pytest.mark.parametrize(
    "error",
    [
        requests.exceptions.InvalidURL("bad url"),
        requests.exceptions.MissingSchema("no scheme"),
        requests.exceptions.TooManyRedirects("redirect loop"),
        requests.exceptions.ContentDecodingError("bad gzip"),
    ],
)
def test_other_request_errors_are_permanent(error: Exception) -> None:
    session = FakeSession(error)

    with pytest.raises(PermanentError, match="Request error"):
        _fetcher(session).fetch()
    assert len(session.calls) == 1
