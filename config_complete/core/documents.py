"""
Document Utilities

Directory scanning and parsing of structured key/value documents
(JSON and YAML).

Author: config-complete Project
License: MIT
"""

import os
import json
import yaml
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional

from .errors import MalformedDocumentError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class DocumentFormat(str, Enum):
    """Supported document formats."""
    JSON = "json"
    YAML = "yaml"

    @property
    def extension(self) -> str:
        """Filename extension, including the leading dot."""
        return f".{self.value}"

    @classmethod
    def for_path(cls, path: str) -> "DocumentFormat":
        """Pick the format matching a file suffix (JSON unless YAML)."""
        if Path(path).suffix.lower() in (".yaml", ".yml"):
            return cls.YAML
        return cls.JSON


def list_documents(directory: Optional[str], extension: str) -> FrozenSet[str]:
    """
    List the document filenames of a directory.

    Args:
        directory: Directory to scan; None disables the scan
        extension: Filename extension to keep (e.g. ".json")

    Returns:
        Filenames ending with the extension (not recursive)

    Raises:
        OSError: If the directory cannot be listed
    """
    if directory is None:
        return frozenset()

    names = frozenset(
        name for name in os.listdir(directory) if name.endswith(extension)
    )
    logger.debug(f"Found {len(names)} {extension} documents in {directory}")
    return names


def parse_document(path: str, document_format: DocumentFormat) -> Any:
    """
    Read and parse one document, whatever its root value.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError / yaml.YAMLError: If the content is malformed
    """
    with open(path, 'r', encoding='utf-8') as f:
        if document_format == DocumentFormat.YAML:
            return yaml.safe_load(f)
        return json.load(f)


def read_mapping(path: str, document_format: DocumentFormat) -> Dict[str, Any]:
    """
    Read a document whose root must be a mapping.

    Each call re-reads the file, so the returned dictionary is never
    shared with a previous caller.

    Raises:
        MalformedDocumentError: If the root is not a mapping
    """
    data = parse_document(path, document_format)
    if not isinstance(data, dict):
        raise MalformedDocumentError(path, type(data).__name__)
    return data
