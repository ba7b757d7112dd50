"""Error hierarchy for schedule loading and retry classification.

This hierarchy lets tenacity retry decorators tell transient fetch failures
(should retry) apart from permanent ones (should not retry).

Example usage with tenacity:
    @retry(retry=retry_if_exception_type(TransientError), stop=stop_after_attempt(3))
    def fetch(url: str) -> str:
        ...
"""


class ScheduleError(Exception):
    """Base exception for all schedule loading errors."""

    pass


class TransientError(ScheduleError):
    """Temporary failure that may succeed on retry.

    Examples: network timeouts, connection resets, 503 Service Unavailable.
    """

    pass


class RateLimitError(TransientError):
    """Sheet host answered 429 Too Many Requests.

    Inherits from TransientError so tenacity will retry it.
    """

    pass


class PermanentError(ScheduleError):
    """Failure that won't succeed on retry.

    Examples: 404 for an unpublished sheet, a payload with no schedule rows.
    """

    pass


class EmptyPayloadError(PermanentError):
    """The published sheet returned an empty or whitespace-only body."""

    pass
