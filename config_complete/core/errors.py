"""
Error Types

Exceptions raised while resolving and validating configuration documents.
Storage and parser failures (OSError, json.JSONDecodeError, yaml.YAMLError)
are not wrapped and reach the caller unchanged.

Author: config-complete Project
License: MIT
"""

from typing import List


class ConfigCompleteError(Exception):
    """Base class for config-complete errors."""


class SourceNotFoundError(ConfigCompleteError, LookupError):
    """Raised when neither the preset nor the custom source holds the file."""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(
            f"could not load {filename} neither from the preset "
            f"nor from the custom configurations directories"
        )


class ValidationAggregateError(ConfigCompleteError, ValueError):
    """
    Raised when a configuration misses required properties.

    Every missing property of a single resolution is reported at once,
    one line per property below the lead line, formatted as
    "-<path> (<reason>)". The JavaScript config-complete package ends every
    line but the last with a comma; these lines carry none.
    """

    def __init__(self, filename: str, missing: List[str]):
        self.filename = filename
        self.missing = list(missing)
        lines = [f"{filename} misses the following required properties:"]
        lines.extend(f"-{entry}" for entry in self.missing)
        super().__init__("\n".join(lines))


class MalformedDocumentError(ConfigCompleteError, ValueError):
    """Raised when a document parses but its root is not a mapping."""

    def __init__(self, path: str, found_type: str):
        self.path = path
        self.found_type = found_type
        super().__init__(f"{path} must contain a top-level mapping, found {found_type}")
