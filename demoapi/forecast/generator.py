"""Forecast generator: synthetic day-by-day forecasts from a summary catalog."""

import logging
import random
from collections.abc import Sequence
from datetime import date, timedelta
from typing import Protocol

from demoapi.config.defaults import DEFAULT_SUMMARIES
from demoapi.models.forecast import ForecastEntry

logger = logging.getLogger(__name__)

MIN_TEMP_C = -20
MAX_TEMP_C = 55  # exclusive


class RandomSource(Protocol):
    def randrange(self, start: int, stop: int | None = None) -> int: ...


class ForecastGenerator:
    """Builds forecasts for the days following a given date.

    Temperatures and summaries are drawn independently per entry, with
    replacement, so repeats across days are expected.
    """

    def __init__(
        self,
        summaries: Sequence[str] = DEFAULT_SUMMARIES,
        rng: RandomSource | None = None,
        min_temp_c: int = MIN_TEMP_C,
        max_temp_c: int = MAX_TEMP_C,
    ):
        if not summaries:
            raise ValueError("summary catalog must not be empty")
        if min_temp_c >= max_temp_c:
            raise ValueError(
                f"empty temperature range [{min_temp_c}, {max_temp_c})"
            )
        self.summaries: tuple[str, ...] = tuple(summaries)
        # The random module's functions are bound methods of a shared Random
        self.rng: RandomSource = rng if rng is not None else random
        self.min_temp_c = min_temp_c
        self.max_temp_c = max_temp_c

    def generate(self, count: int, today: date) -> list[ForecastEntry]:
        """Generate ``count`` entries for the days after ``today``.

        Args:
            count: Number of days to forecast. Zero yields an empty list.
            today: Reference date; the first entry is dated the day after.

        Returns:
            Entries ordered by date, one day apart.

        Raises:
            TypeError: If count is not an integer.
            ValueError: If count is negative or runs past date.max.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {type(count).__name__}")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        try:
            today + timedelta(days=count)
        except OverflowError:
            raise ValueError(
                f"{count} days after {today} is past the last supported date"
            ) from None

        logger.debug("Generating %d forecast entries after %s", count, today)
        return [self._entry(today + timedelta(days=i)) for i in range(1, count + 1)]

    def _entry(self, day: date) -> ForecastEntry:
        temperature_c = self.rng.randrange(self.min_temp_c, self.max_temp_c)
        summary = self.summaries[self.rng.randrange(len(self.summaries))]
        return ForecastEntry(date=day, temperature_c=temperature_c, summary=summary)


def generate_forecast(
    count: int,
    today: date | None = None,
    rng: RandomSource | None = None,
) -> list[ForecastEntry]:
    """Generate a forecast with the default catalog, starting from today."""
    if today is None:
        today = date.today()
    return ForecastGenerator(rng=rng).generate(count, today)
