"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Dataset client (HTTP)
- Gazetteer loader (pgeocode postal tables)
- TwiML formatting for the SMS webhook
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from sms_locator.shell.config_loader import load_config, load_config_from_env
from sms_locator.shell.dataset_client import DatasetClient, DatasetFetchError
from sms_locator.shell.gazetteer_loader import load_gazetteer
from sms_locator.shell.twiml import TwimlFormatter

__all__ = [
    "DatasetClient",
    "DatasetFetchError",
    "load_gazetteer",
    "TwimlFormatter",
    "load_config",
    "load_config_from_env",
]
