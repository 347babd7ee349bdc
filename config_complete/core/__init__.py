"""
config-complete Core Module

Source resolution, schema descriptions and presence validation.

Author: config-complete Project
License: MIT
"""

from .errors import ConfigCompleteError, SourceNotFoundError, ValidationAggregateError, MalformedDocumentError
from .resolver import Resolver, ConfigSource, SourceKind
from .schema_description import Leaf, Subtree, load_description
from .validator import check_configuration, find_missing_properties

__all__ = [
    'ConfigCompleteError', 'SourceNotFoundError', 'ValidationAggregateError', 'MalformedDocumentError',
    'Resolver', 'ConfigSource', 'SourceKind', 'Leaf', 'Subtree', 'load_description',
    'check_configuration', 'find_missing_properties'
]
