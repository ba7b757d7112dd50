"""Fetches the published schedule sheet as CSV text.

The sheet is a public CSV export, so a plain GET is enough. Transient
failures (dropped connections, timeouts, 5xx, 429) are retried with tenacity.
Any other requests error or HTTP status surfaces as a PermanentError, so
callers only ever see ScheduleError subclasses.
"""

import requests
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from camp_schedule.errors import (
    EmptyPayloadError,
    PermanentError,
    RateLimitError,
    TransientError,
)
from camp_schedule.logging import get_logger

log = get_logger(__name__)

# Statuses worth another attempt besides 5xx
_RETRY_STATUSES: frozenset[int] = frozenset({408, 429})

# Connection-level failures worth another attempt
_TRANSIENT_REQUEST_ERRORS = (
    requests.ConnectionError,
    requests.Timeout,
    requests.exceptions.ChunkedEncodingError,
)


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    log.info(
        "sheet_fetch_retrying",
        attempt=retry_state.attempt_number,
        error=str(error),
    )


class SheetFetcher:
    """Downloads the CSV export of a published spreadsheet."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        attempts: int = 3,
        retry_wait: float = 2.0,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize SheetFetcher.

        Args:
            url: Published CSV export URL.
            timeout: Per-request timeout in seconds.
            attempts: Maximum attempts on transient failures.
            retry_wait: Seconds to wait between attempts.
            session: Optional requests session (a fresh one is created otherwise).
        """
        self.url = url
        self.timeout = timeout
        self.attempts = attempts
        self.retry_wait = retry_wait
        self.session = session or requests.Session()

    def fetch(self) -> str:
        """Fetch the CSV payload, retrying transient failures.

        Returns:
            The response body decoded as UTF-8.

        Raises:
            TransientError: If the last attempt still failed transiently.
            PermanentError: On a non-retryable HTTP status.
            EmptyPayloadError: If the body is empty or whitespace-only.
        """
        retrying = Retrying(
            stop=stop_after_attempt(self.attempts),
            wait=wait_fixed(self.retry_wait),
            retry=retry_if_exception_type(TransientError),
            before_sleep=_log_retry,
            reraise=True,
        )
        return retrying(self._fetch_once)

    def _fetch_once(self) -> str:
        log.info("sheet_fetch_started", url=self.url)

        try:
            response = self.session.get(self.url, timeout=self.timeout)
        except _TRANSIENT_REQUEST_ERRORS as e:
            log.warning("sheet_fetch_network_error", error=str(e), type=type(e).__name__)
            raise TransientError(f"Network error fetching schedule: {e}") from e
        except requests.RequestException as e:
            # Bad URL, redirect loop, undecodable body: retrying will not help
            log.error("sheet_fetch_request_error", error=str(e), type=type(e).__name__)
            raise PermanentError(f"Request error fetching schedule: {e}") from e

        status = response.status_code
        if status == 429:
            log.warning("sheet_fetch_rate_limited", status=status)
            raise RateLimitError("HTTP error! status: 429")
        if status >= 500 or status in _RETRY_STATUSES:
            log.warning("sheet_fetch_http_error", status=status, retryable=True)
            raise TransientError(f"HTTP error! status: {status}")
        if not 200 <= status < 300:
            log.error("sheet_fetch_http_error", status=status, retryable=False)
            raise PermanentError(f"HTTP error! status: {status}")

        text = response.content.decode("utf-8", errors="replace")
        if not text.strip():
            log.error("sheet_fetch_empty", length=len(text))
            raise EmptyPayloadError("Empty CSV response")

        log.info("sheet_fetch_succeeded", length=len(text), preview=text[:500])
        return text
