"""Shared test fixtures."""

import random
from datetime import date
from pathlib import Path

import pytest
import yaml

from demoapi.config.schema import ServiceConfig
from demoapi.forecast.generator import ForecastGenerator

TODAY = date(2026, 2, 10)


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, values: list[int]):
        self._values = list(values)
        self.calls: list[tuple[int, int | None]] = []

    def randrange(self, start: int, stop: int | None = None) -> int:
        self.calls.append((start, stop))
        return self._values.pop(0)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def default_config() -> ServiceConfig:
    return ServiceConfig()


@pytest.fixture
def seeded_generator() -> ForecastGenerator:
    return ForecastGenerator(rng=random.Random(42))


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "forecast": {"days": 3, "summaries": ["Hot", "Cold"]},
        "server": {"port": 9000},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def scripted_random() -> type[ScriptedRandom]:
    return ScriptedRandom
