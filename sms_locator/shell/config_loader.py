"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, DatasetConfig) are defined in sms_locator/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from sms_locator.core.config import Config, DatasetConfig


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a ${VAR} placeholder from the environment.

    Non-string values and plain strings are returned unchanged. An
    unset variable leaves the placeholder in place.
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


def _parse_dataset(data: dict[str, Any]) -> DatasetConfig:
    """Parse a dataset from config data."""
    return DatasetConfig(
        label=data["label"],
        url=_resolve_value(data.get("url", "")),
        resource_kind=data.get("resource_kind", "resources"),
        name_field=data.get("name_field", "shelter"),
        address_field=data.get("address_field", "address"),
        phone_field=data.get("phone_field", "phone"),
        postal_code_field=data.get("postal_code_field", "zip"),
        identity_field=data.get("identity_field"),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()

    datasets = [
        _parse_dataset(d)
        for d in data.get("datasets", [])
    ]

    return Config(
        datasets=datasets,
        radius_miles=float(data.get("radius_miles", defaults.radius_miles)),
        max_results_per_query=int(
            data.get("max_results_per_query", defaults.max_results_per_query)
        ),
        segment_budget=int(data.get("segment_budget", defaults.segment_budget)),
        refresh_interval_seconds=int(
            data.get("refresh_interval_seconds", defaults.refresh_interval_seconds)
        ),
        gazetteer_country=str(data.get("gazetteer_country", defaults.gazetteer_country)),
        number_messages=bool(data.get("number_messages", defaults.number_messages)),
        request_timeout_seconds=int(
            data.get("request_timeout_seconds", defaults.request_timeout_seconds)
        ),
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

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
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %d datasets, %.1f mile radius, %d results per query",
        len(config.datasets),
        config.radius_miles,
        config.max_results_per_query,
    )

    return config


def load_config_from_env() -> Config:
    """Load a single-dataset configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        DATA_URL: GeoJSON dataset URL (required)
        RESOURCE_KIND: Plural noun for replies (default "shelters")
        NAME_FIELD: Feature property with the display name (default "shelter")
        RADIUS_MILES: Search radius (default 5)
        MAX_RESULTS_PER_QUERY: Resources per postal code (default 3)
        REFRESH_INTERVAL_SECONDS: Dataset refresh interval (default 300)
        GAZETTEER_COUNTRY: Postal code table country (default US)

    Returns:
        Config object from environment
    """
    defaults = Config()
    data_url = os.environ.get("DATA_URL")

    datasets = []
    if data_url:
        datasets.append(DatasetConfig(
            label="default",
            url=data_url,
            resource_kind=os.environ.get("RESOURCE_KIND", "shelters"),
            name_field=os.environ.get("NAME_FIELD", "shelter"),
        ))
    else:
        logger.warning("DATA_URL not set, no datasets configured")

    return Config(
        datasets=datasets,
        radius_miles=float(os.environ.get("RADIUS_MILES", defaults.radius_miles)),
        max_results_per_query=int(
            os.environ.get("MAX_RESULTS_PER_QUERY", defaults.max_results_per_query)
        ),
        refresh_interval_seconds=int(
            os.environ.get("REFRESH_INTERVAL_SECONDS", defaults.refresh_interval_seconds)
        ),
        gazetteer_country=os.environ.get("GAZETTEER_COUNTRY", defaults.gazetteer_country),
    )
