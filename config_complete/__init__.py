"""
config-complete

Loads environment-specific configuration documents from a preset directory
and an overriding custom directory, and checks them against an optional
schema description of required properties.

    >>> from config_complete import create
    >>> accessor = create("config/presets", "config/description.json", "config/customs")
    >>> accessor.get_conf("production")["env"]
    'production'

Author: config-complete Project
License: MIT
"""

from .core.accessor import ConfigComplete, create, create_from_env, create_from_settings, load_conf
from .core.documents import DocumentFormat
from .core.errors import (
    ConfigCompleteError,
    MalformedDocumentError,
    SourceNotFoundError,
    ValidationAggregateError
)
from .config.settings import AccessorSettings

__version__ = "0.1.0"
__all__ = [
    'ConfigComplete', 'create', 'create_from_env', 'create_from_settings', 'load_conf',
    'DocumentFormat', 'AccessorSettings', 'ConfigCompleteError', 'MalformedDocumentError',
    'SourceNotFoundError', 'ValidationAggregateError'
]
