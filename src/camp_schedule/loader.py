"""ScheduleLoader - fetch, parse, and fall back to the sample schedule.

The loader owns the "already loaded" state: once a load has produced a
schedule (from the sheet or from the sample), later load() calls return the
same result until retry() forces a fresh fetch-then-parse cycle.
"""

import time
from collections.abc import Callable

from camp_schedule.errors import PermanentError, ScheduleError
from camp_schedule.fetch import SheetFetcher
from camp_schedule.logging import get_logger
from camp_schedule.models import LoadResult
from camp_schedule.parser import parse_schedule_with_stats
from camp_schedule.sample import sample_schedule

log = get_logger(__name__)


class ScheduleLoader:
    """Loads the schedule once, substituting the sample on any failure."""

    def __init__(
        self,
        fetcher: SheetFetcher,
        *,
        fallback_delay: float = 1.0,
        use_fallback: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize ScheduleLoader.

        Args:
            fetcher: Source of the raw CSV payload.
            fallback_delay: Seconds to wait before substituting the sample.
            use_fallback: If False, load failures are raised instead.
            sleep: Sleep function (injected by tests).
        """
        self.fetcher = fetcher
        self.fallback_delay = fallback_delay
        self.use_fallback = use_fallback
        self._sleep = sleep
        self.loaded = False
        self._result: LoadResult | None = None

    def load(self, *, force: bool = False) -> LoadResult:
        """Fetch and parse the schedule unless it is already loaded.

        Args:
            force: Re-run the full cycle even if a schedule is already loaded.

        Returns:
            LoadResult with source "sheet", or "sample" after a failure.

        Raises:
            ScheduleError: Only when use_fallback is False and the load failed.
        """
        if self.loaded and self._result is not None and not force:
            log.debug("schedule_already_loaded", source=self._result.source)
            return self._result

        try:
            result = self._load_from_sheet()
        except ScheduleError as e:
            log.warning("schedule_load_failed", error=str(e), type=type(e).__name__)
            if not self.use_fallback:
                raise
            result = self._load_sample(str(e))

        self.loaded = True
        self._result = result
        return result

    def retry(self) -> LoadResult:
        """Discard the current result and load again from the sheet."""
        return self.load(force=True)

    def _load_from_sheet(self) -> LoadResult:
        text = self.fetcher.fetch()
        schedule, stats = parse_schedule_with_stats(text)
        if not schedule:
            raise PermanentError("No valid schedule data found in CSV")

        log.info("schedule_loaded", source="sheet", days=stats.days, activities=stats.activities)
        return LoadResult(schedule=schedule, source="sheet", stats=stats)

    def _load_sample(self, error: str) -> LoadResult:
        if self.fallback_delay > 0:
            self._sleep(self.fallback_delay)
        log.info("schedule_loaded", source="sample", error=error)
        return LoadResult(schedule=sample_schedule(), source="sample", error=error)
