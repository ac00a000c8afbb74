"""Tests for config loading and get/set."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from demoapi.config.loader import (
    get_config_value,
    load_config,
    set_config_value,
)
from demoapi.config.schema import LogLevel, ServiceConfig


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.forecast.days == 3
        assert config.forecast.summaries == ["Hot", "Cold"]
        assert config.server.port == 9000

    def test_unset_sections_use_defaults(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.logging.level == LogLevel.INFO
        assert config.server.host == "127.0.0.1"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == ServiceConfig()

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        assert load_config(tmp_path / "nope.yaml") == ServiceConfig()

    def test_invalid_yaml_values_raise(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"forecast": {"days": -2}}, f)
        with pytest.raises(ValidationError):
            load_config(path)

    def test_shipped_default_config(self):
        path = Path(__file__).parents[3] / "configs" / "default.yaml"
        assert load_config(path) == ServiceConfig()


class TestGetConfigValue:
    def test_dotted_key(self, default_config: ServiceConfig):
        assert get_config_value(default_config, "forecast.days") == 5

    def test_list_index(self, default_config: ServiceConfig):
        assert get_config_value(default_config, "forecast.summaries.0") == "Freezing"

    def test_top_level(self, default_config: ServiceConfig):
        val = get_config_value(default_config, "server")
        assert val.port == 8000

    def test_invalid_key(self, default_config: ServiceConfig):
        with pytest.raises(KeyError):
            get_config_value(default_config, "nonexistent.key")


class TestSetConfigValue:
    def test_set_and_revalidate(self, default_config: ServiceConfig):
        new_config = set_config_value(default_config, "forecast.days", 7)
        assert new_config.forecast.days == 7
        assert default_config.forecast.days == 5

    def test_set_string_coercion(self, default_config: ServiceConfig):
        new_config = set_config_value(default_config, "server.port", "9001")
        assert new_config.server.port == 9001

    def test_set_list_from_csv(self, default_config: ServiceConfig):
        new_config = set_config_value(default_config, "forecast.summaries", "Hot, Cold")
        assert new_config.forecast.summaries == ["Hot", "Cold"]

    def test_invalid_value_raises(self, default_config: ServiceConfig):
        with pytest.raises(ValidationError):
            set_config_value(default_config, "forecast.days", -1)

    def test_unknown_key_raises(self, default_config: ServiceConfig):
        with pytest.raises(KeyError):
            set_config_value(default_config, "forecast.bogus", "1")
