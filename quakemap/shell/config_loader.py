"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, BaseLayer) are defined in quakemap/core/config.py
to avoid information leakage between layers.
"""

import dataclasses
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quakemap.core.config import BaseLayer, Config, default_base_layers


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"

# Environment variables that override individual settings
ENV_OVERRIDES = {
    "EARTHQUAKE_FEED_URL": "earthquake_feed_url",
    "PLATES_URL": "plates_url",
    "MAP_OUTPUT_PATH": "output_path",
}


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} environment placeholder.

    Args:
        value: Value to resolve (may be a ${...} placeholder)

    Returns:
        Resolved value, or the placeholder unchanged if the variable is unset
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_base_layer(data: dict[str, Any]) -> BaseLayer:
    """Parse a base tile layer from config data."""
    return BaseLayer(
        name=data["name"],
        tiles=_resolve_value(data["tiles"]),
        attribution=data.get("attribution", ""),
        show=bool(data.get("show", False)),
    )


def _parse_timeout(value: Any) -> float | None:
    """Parse request_timeout; null or 0 means no timeout."""
    if value is None:
        return None
    timeout = float(value)
    return timeout if timeout != 0 else None


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()

    map_data = data.get("map", {})
    center = map_data.get("center", {})
    snapshot = data.get("snapshot", {})

    if "base_layers" in data:
        base_layers = [_parse_base_layer(b) for b in data["base_layers"]]
    else:
        base_layers = default_base_layers()

    return Config(
        earthquake_feed_url=_resolve_value(
            data.get("earthquake_feed_url", defaults.earthquake_feed_url)
        ),
        plates_url=_resolve_value(data.get("plates_url", defaults.plates_url)),
        center_latitude=float(center.get("latitude", defaults.center_latitude)),
        center_longitude=float(center.get("longitude", defaults.center_longitude)),
        zoom=int(map_data.get("zoom", defaults.zoom)),
        base_layers=base_layers,
        legend_position=map_data.get("legend_position", defaults.legend_position),
        output_path=str(data.get("output_path", defaults.output_path)),
        request_timeout=_parse_timeout(data.get("request_timeout")),
        snapshot_width=int(snapshot.get("width", defaults.snapshot_width)),
        snapshot_height=int(snapshot.get("height", defaults.snapshot_height)),
    )


def apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to a configuration.

    Environment variables:
        EARTHQUAKE_FEED_URL: Earthquake GeoJSON feed URL
        PLATES_URL: Plate boundary GeoJSON URL
        MAP_OUTPUT_PATH: Output HTML path

    Returns:
        New Config with overrides applied
    """
    overrides = {}
    for env_var, field_name in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            logger.info("Using %s from environment", env_var)
            overrides[field_name] = value

    if not overrides:
        return config

    return dataclasses.replace(config, **overrides)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file, then apply env overrides.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return apply_env_overrides(Config())

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return apply_env_overrides(Config())

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %d base layers, center (%.2f, %.2f), zoom %d",
        len(config.base_layers),
        config.center_latitude,
        config.center_longitude,
        config.zoom,
    )

    return apply_env_overrides(config)
