"""Default summary catalog for synthetic forecasts."""

DEFAULT_SUMMARIES: tuple[str, ...] = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)

DEFAULT_FORECAST_DAYS = 5
