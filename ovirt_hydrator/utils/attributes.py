"""
Attribute map handling for XML-derived raw nodes.

XML attributes arrive nested under a reserved key. Once merged they are
indistinguishable from child-element properties.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from ovirt_hydrator.config import DEFAULT_ATTRIBUTE_KEY


def merge_attributes(node: Any, attribute_key: str = DEFAULT_ATTRIBUTE_KEY) -> Any:
    """
    Merge a node's attribute map into a copy of the node.

    Attribute values win over sibling keys of the same name. The attribute
    key is removed, so merging an already-merged node returns an equal copy.
    Non-mapping values are returned unchanged.

    Args:
        node: Raw node
        attribute_key: Key holding the attribute map

    Returns:
        New dict with attributes promoted to regular keys
    """
    if not isinstance(node, Mapping):
        return node

    merged = dict(node)
    attributes = merged.pop(attribute_key, None)
    if isinstance(attributes, Mapping):
        merged.update(attributes)
    return merged


def strip_attributes(node: Any, attribute_key: str = DEFAULT_ATTRIBUTE_KEY) -> Any:
    """Return a copy of the node without its attribute map."""
    if not isinstance(node, Mapping):
        return node
    return {key: value for key, value in node.items() if key != attribute_key}


def strip_keys(node: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a copy of the node without the given keys."""
    excluded = frozenset(keys)
    return {key: value for key, value in node.items() if key not in excluded}


def get_attributes(node: Any, attribute_key: str = DEFAULT_ATTRIBUTE_KEY) -> dict[str, Any]:
    """Return the node's attribute map, or an empty dict."""
    if not isinstance(node, Mapping):
        return {}
    attributes = node.get(attribute_key)
    if isinstance(attributes, Mapping):
        return dict(attributes)
    return {}
