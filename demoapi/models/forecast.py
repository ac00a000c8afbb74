"""Synthetic forecast data models."""

from dataclasses import dataclass
from datetime import date

from demoapi.forecast.conversion import to_fahrenheit


@dataclass(frozen=True)
class ForecastEntry:
    date: date
    temperature_c: int
    summary: str | None = None

    @property
    def temperature_f(self) -> int:
        return to_fahrenheit(self.temperature_c)
