"""YAML config loader with command-line overrides."""

from pathlib import Path

import yaml

from spotcheck.config.schema import SpotCheckConfig


def load_config(path: str | Path | None = None) -> SpotCheckConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, every section takes its defaults.
    """
    if path is None:
        return SpotCheckConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return SpotCheckConfig(**raw)


def with_device_host(config: SpotCheckConfig, host: str | None) -> SpotCheckConfig:
    """Return a copy of the config pointed at another device host."""
    if not host:
        return config
    return config.model_copy(
        update={"device": config.device.model_copy(update={"host": host})}
    )
