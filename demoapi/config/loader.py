"""YAML config loader with runtime get/set."""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from demoapi.config.schema import ServiceConfig


def load_config(path: str | Path) -> ServiceConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults.
    """
    path = Path(path)
    if not path.exists():
        return ServiceConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return ServiceConfig(**raw)


def get_config_value(config: ServiceConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'forecast.days'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: ServiceConfig, dotted_key: str, value: Any) -> ServiceConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new ServiceConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if not isinstance(target, dict) or part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if not isinstance(target, dict) or parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target[parts[-1]]
    if isinstance(value, str):
        if isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, list):
            value = [item.strip() for item in value.split(",")]
    target[parts[-1]] = value
    return ServiceConfig(**data)
