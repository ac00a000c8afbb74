"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator

from demoapi.config.defaults import DEFAULT_FORECAST_DAYS, DEFAULT_SUMMARIES


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    days: int = Field(default=DEFAULT_FORECAST_DAYS, ge=0, le=366)
    min_temp_c: int = -20
    max_temp_c: int = 55  # exclusive
    summaries: list[str] = Field(default_factory=lambda: list(DEFAULT_SUMMARIES))

    @field_validator("summaries")
    @classmethod
    def _check_summaries(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("summaries must not be empty")
        if any(not s.strip() for s in v):
            raise ValueError("summaries must not contain blank entries")
        if len(set(v)) != len(v):
            raise ValueError("summaries must be distinct")
        return v

    @model_validator(mode="after")
    def _check_range(self) -> "ForecastConfig":
        if self.min_temp_c >= self.max_temp_c:
            raise ValueError("min_temp_c must be below max_temp_c")
        return self


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.INFO


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    forecast: ForecastConfig = ForecastConfig()
    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()
