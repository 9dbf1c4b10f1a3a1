"""YAML config loader with runtime get/set."""

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from fishcast.config.schema import FishcastConfig


def load_config(path: str | Path) -> FishcastConfig:
    """Load and validate config from a YAML file.

    Missing sections fall back to schema defaults; an empty file is valid.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return FishcastConfig(**raw)


def config_hash(config: FishcastConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: FishcastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'cache.weather_ttl_minutes'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: FishcastConfig, dotted_key: str, value: Any) -> FishcastConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new FishcastConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Coerce CLI strings to the type of the value being replaced
    old_value = target[parts[-1]]
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
    target[parts[-1]] = value
    return FishcastConfig(**data)


def save_config(config: FishcastConfig, path: str | Path) -> None:
    """Write the config back to YAML."""
    data = json.loads(config.model_dump_json())
    with open(Path(path), "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)
