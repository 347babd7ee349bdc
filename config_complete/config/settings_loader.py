"""
Settings Loader

Builds AccessorSettings from CONFIG_COMPLETE_* environment variables,
optionally read from a .env file. Explicit overrides win over the
environment.

Author: config-complete Project
License: MIT
"""

import os
from typing import Any, Dict, Optional
from dotenv import load_dotenv

from .settings import AccessorSettings
from ..utils.logger import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "CONFIG_COMPLETE_"

# settings field -> environment variable
ENV_BINDINGS = {
    "presets_directory": f"{ENV_PREFIX}PRESETS_DIR",
    "description_file": f"{ENV_PREFIX}DESCRIPTION_FILE",
    "customs_directory": f"{ENV_PREFIX}CUSTOMS_DIR",
    "document_format": f"{ENV_PREFIX}FORMAT",
    "default_environment": f"{ENV_PREFIX}DEFAULT_ENV",
}


def _collect_env_vars() -> Dict[str, Any]:
    values = {}
    for field_name, variable in ENV_BINDINGS.items():
        value = os.getenv(variable)
        if value:
            values[field_name] = value
    return values


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> AccessorSettings:
    """
    Load accessor settings from the environment.

    Args:
        env_file: Optional .env file; variables already set are kept
        **overrides: Settings fields taking precedence over the environment

    Returns:
        Validated AccessorSettings

    Raises:
        pydantic.ValidationError: If a value is invalid (e.g. unknown format)
    """
    if env_file is not None:
        load_dotenv(env_file)

    settings_data = _collect_env_vars()
    if settings_data:
        logger.debug(f"Settings read from environment: {sorted(settings_data)}")

    settings_data.update({k: v for k, v in overrides.items() if v is not None})
    return AccessorSettings(**settings_data)
