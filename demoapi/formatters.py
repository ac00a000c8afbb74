"""Output formatters for forecast entries."""

import json

from demoapi.models.forecast import ForecastEntry


def entry_to_dict(e: ForecastEntry) -> dict:
    """Wire shape served by the HTTP API."""
    return {
        "date": e.date.isoformat(),
        "temperatureC": e.temperature_c,
        "temperatureF": e.temperature_f,
        "summary": e.summary,
    }


def format_forecast_json(entries: list[ForecastEntry]) -> str:
    return json.dumps([entry_to_dict(e) for e in entries], indent=2)


def format_forecast_text(entries: list[ForecastEntry]) -> str:
    """Plain text table for the terminal."""
    if not entries:
        return "No forecast entries"
    lines = [f"{'Date':<10}  {'°C':>4}  {'°F':>4}  Summary"]
    for e in entries:
        lines.append(
            f"{e.date.isoformat():<10}  {e.temperature_c:>4}  "
            f"{e.temperature_f:>4}  {e.summary or '-'}"
        )
    return "\n".join(lines)
