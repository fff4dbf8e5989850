"""Global configuration: constants, settings, logging."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from pydantic import BaseModel

# Environment variable prefix for all settings
ENV_PREFIX = "DYNLOOKUP_"

# Human-facing labels for property kinds
KIND_LABELS = {
    "input": "Input property",
    "lookup": "Lookup property",
}

# Field keys used in validation results
KEY_NAME = "Name"
KEY_DISPLAY_NAME = "DisplayName"
KEY_VALUE = "Value"
KEY_DISPLAY_VALUE = "DisplayValue"
KEY_PROPERTIES = "Properties"
KEY_ACTION_NAME = "ActionName"

# Validation messages
MSG_NAME_REQUIRED = "Property name must not be empty"
MSG_DISPLAY_NAME_REQUIRED = "Display name must not be empty"
MSG_VALUE_REQUIRED = "Property value must not be empty"
MSG_DISPLAY_VALUE_REQUIRED = "Display value of a lookup property must not be empty"
MSG_PROPERTIES_REQUIRED = "Property list must not be empty"
MSG_TABLE_PROPERTIES_REQUIRED = "At least one property is required"
MSG_ACTION_NAME_REQUIRED = "Action name must not be empty"
MSG_DUPLICATE_NAME = "Property name '{name}' is duplicated"
MSG_INVALID_IDENTIFIER = (
    "Property name may only contain letters, digits and underscores "
    "and must not start with a digit"
)

_TRUE_VALUES = {"1", "true", "yes", "on"}

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Runtime settings for the lookup engine."""

    log_level: str = "INFO"
    table_duplicate_check: bool = False
    """Run the duplicate-name rule during table-level validation."""

    strict_names: bool = False
    """Require identifier-shaped property names."""


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings: defaults -> ``DYNLOOKUP_*`` environment variables."""
    env = os.environ if environ is None else environ
    values: dict[str, object] = {}

    level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    if level:
        values["log_level"] = level.strip().upper()

    for field in ("table_duplicate_check", "strict_names"):
        raw = env.get(f"{ENV_PREFIX}{field.upper()}")
        if raw is not None:
            values[field] = raw.strip().lower() in _TRUE_VALUES

    return Settings(**values)


def configure_logging(level: str | int | None = None) -> None:
    """Configure the ``dynlookup`` logger for a host application."""
    if level is None:
        level = load_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("dynlookup")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
