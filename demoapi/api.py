"""Demo forecast API: FastAPI app serving synthetic weather forecasts."""

import json
import logging
import platform
from collections.abc import Callable
from datetime import UTC, date, datetime
from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI

from demoapi.config.schema import ServiceConfig
from demoapi.forecast.generator import ForecastGenerator
from demoapi.formatters import entry_to_dict

logger = logging.getLogger(__name__)

REPORTED_PACKAGES = ("fastapi", "pydantic", "PyYAML")


def create_app(
    config: ServiceConfig | None = None,
    generator: ForecastGenerator | None = None,
    clock: Callable[[], date] = date.today,
) -> FastAPI:
    """Build the app. ``generator`` and ``clock`` are injectable for tests."""
    if config is None:
        config = ServiceConfig()
    if generator is None:
        generator = ForecastGenerator(
            summaries=config.forecast.summaries,
            min_temp_c=config.forecast.min_temp_c,
            max_temp_c=config.forecast.max_temp_c,
        )
    days = config.forecast.days
    app_version = installed_version("demoapi")

    app = FastAPI(title="Demo Forecast API", version=app_version)

    # ── Forecast ────────────────────────────────────────────────

    @app.get("/weatherforecast", name="GetWeatherForecast")
    def get_weather_forecast():
        """Synthetic forecast for the days after today."""
        return [entry_to_dict(e) for e in generator.generate(days, clock())]

    # ── Package diagnostics ─────────────────────────────────────

    @app.get("/weatherforecast/json-test")
    def json_test():
        return package_report(
            "JSON serialization is working!",
            "This endpoint tests JSON serialization and logging",
        )

    @app.get("/nuget-test", name="PackageTest")
    def package_test():
        return package_report(
            "Both packages are working correctly!",
            "This endpoint tests package availability for deployment pipelines",
        )

    @app.get("/health")
    def health():
        return {"status": "ok", "version": app_version}

    return app


def package_report(message: str, additional_info: str) -> dict:
    """Round-trip a diagnostics payload through JSON and annotate it."""
    logger.info("Testing JSON serialization and logging packages")

    data = {
        "message": message,
        "timestamp": datetime.now(UTC).isoformat(),
        "runtime": runtime_description(),
        "packages": {name: installed_version(name) for name in REPORTED_PACKAGES},
    }
    text = json.dumps(data, indent=2)
    parsed = json.loads(text)
    parsed["additionalInfo"] = additional_info

    logger.info("Successfully tested JSON serialization and logging packages")
    return parsed


def runtime_description() -> str:
    return f"{platform.python_implementation()} {platform.python_version()}"


def installed_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "not installed"
