"""Process Entry Point.

Loads configuration and the postal code table, performs the first
dataset refresh, starts the periodic refresh and serves the webhook.
"""

import logging
import os
import sys

from flask import Flask

from sms_locator.app import create_app
from sms_locator.core.config import Config, validate_config
from sms_locator.service import LocatorService
from sms_locator.shell.config_loader import load_config, load_config_from_env
from sms_locator.shell.gazetteer_loader import load_gazetteer


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif os.environ.get("DATA_URL"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def create_application() -> tuple[Flask, LocatorService]:
    """Build the service and app, and load the datasets once.

    Exits with status 1 if the configuration is invalid, the postal code
    table cannot be loaded or no dataset could be loaded.
    """
    config = _get_config()

    validation = validate_config(config)
    for warning in validation.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not validation.valid:
        for error in validation.critical_errors:
            logger.error("Config %s: %s", error.field, error.message)
        sys.exit(1)

    try:
        gazetteer = load_gazetteer(config.gazetteer_country)
    except (ValueError, OSError) as e:
        logger.error("Could not load postal code table: %s", e)
        sys.exit(1)

    service = LocatorService(config, gazetteer)
    result = service.refresh()
    if not service.has_data:
        logger.error("No location data available at startup: %s", "; ".join(result.errors))
        sys.exit(1)

    return create_app(service), service


def main() -> None:
    """Run the webhook server on PORT (default 8080)."""
    app, service = create_application()
    service.start_refresh_loop()

    port = int(os.environ.get("PORT", "8080"))
    logger.info("SMS webhook listening on port %d", port)
    try:
        app.run(host="0.0.0.0", port=port)
    finally:
        service.stop_refresh_loop()


if __name__ == "__main__":
    main()
