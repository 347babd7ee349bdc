"""
Configuration Validator

Walks a schema description depth-first and collects one path-qualified
message per required property the configuration lacks. Only presence is
checked; values are never coerced, altered or removed.

Author: config-complete Project
License: MIT
"""

from collections.abc import Mapping
from typing import Any, List

from .schema_description import Leaf, Subtree

MISSING_NODE_REASON = "missing the whole configuration node"


def qualified_path(prefix: str, key: str) -> str:
    """Join a dotted path prefix and a property name."""
    return f"{prefix}.{key}" if prefix else key


def error_message(path: str, reason: str) -> str:
    return f"{path} ({reason})"


def check_configuration(
    configuration: Mapping[str, Any],
    description: Subtree,
    errors: List[str],
    prefix: str = ""
) -> None:
    """
    Append an error to ``errors`` for every described property missing
    from ``configuration``.

    Args:
        configuration: Configuration subtree to check
        description: Schema description of that subtree
        errors: Accumulated error messages
        prefix: Dotted path of the subtree (empty at the root)
    """
    for key, node in description.children.items():
        path = qualified_path(prefix, key)

        if key not in configuration:
            _report_missing(node, errors, path)
        elif isinstance(node, Subtree):
            value = configuration[key]
            if isinstance(value, Mapping):
                check_configuration(value, node, errors, path)
            else:
                # a scalar has no children to satisfy the description
                check_absent(node, errors, path)


def check_absent(description: Subtree, errors: List[str], prefix: str) -> None:
    """Report every property under a configuration node that does not exist."""
    for key, node in description.children.items():
        _report_missing(node, errors, qualified_path(prefix, key))


def _report_missing(node, errors: List[str], path: str) -> None:
    if isinstance(node, Leaf):
        errors.append(error_message(path, node.description))
    else:
        errors.append(error_message(path, MISSING_NODE_REASON))
        check_absent(node, errors, path)


def find_missing_properties(configuration: Mapping[str, Any], description: Subtree) -> List[str]:
    """
    Collect the missing-property messages of a whole configuration.

    Returns:
        Messages in depth-first description order; empty when valid
    """
    errors: List[str] = []
    check_configuration(configuration, description, errors)
    return errors
