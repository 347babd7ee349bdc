"""
Schema Description

A schema description mirrors the expected shape of a configuration: every
key it names is required, mappings describe configuration subtrees and any
other value is a human-readable explanation of a leaf property.

The raw document is converted once, at load time, into Leaf and Subtree
nodes so the validator never has to inspect raw values.

Author: config-complete Project
License: MIT
"""

import json
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

from .documents import DocumentFormat, read_mapping
from ..utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Leaf:
    """A required leaf property and the explanation shown when it is missing."""
    description: str


@dataclass(frozen=True)
class Subtree:
    """A required configuration node and its required children, in order."""
    children: Dict[str, "SchemaNode"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)


SchemaNode = Union[Leaf, Subtree]


def _leaf_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (list, bool, int, float)):
        # literal document form: [1, 2], true, null
        return json.dumps(value, default=str)
    # other YAML scalars (dates, timestamps) as written
    return str(value)


def build_schema_node(value: Any) -> SchemaNode:
    """Convert a raw description value into a schema node."""
    if isinstance(value, Mapping):
        return Subtree({str(key): build_schema_node(child) for key, child in value.items()})
    return Leaf(_leaf_text(value))


def load_description(path: Optional[str]) -> Optional[Subtree]:
    """
    Load a schema description file.

    Args:
        path: Description file path; None disables validation

    Returns:
        Root Subtree, or None when no path is given

    Raises:
        MalformedDocumentError: If the description root is not a mapping
    """
    if path is None:
        return None

    raw = read_mapping(path, DocumentFormat.for_path(path))
    description = build_schema_node(raw)
    logger.info(f"Loaded schema description {path} ({len(description)} top-level properties)")
    return description
