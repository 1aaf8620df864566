"""
Structural classification of raw nodes.

oVirt responses carry no schema, so links, resource references and search
descriptors are told apart purely by the shape of their keys and by
regex conventions on ``rel`` and ``href``.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from ovirt_hydrator.config import DEFAULT_ATTRIBUTE_KEY, RESERVED_KEYS
from ovirt_hydrator.utils.attributes import merge_attributes
from ovirt_hydrator.utils.patterns import (
    SEARCH_OPTION_PATTERN,
    extract_special_object_collection,
    extract_special_object_name,
    has_resource_id,
)


class NodeKind(str, Enum):
    """What a raw node represents once classified."""

    PROPERTY = "property"
    COLLECTION_LINK = "collection_link"
    SEARCH_OPTION = "search_option"
    RESOURCE_LINK = "resource_link"
    SPECIAL_OBJECT = "special_object"


class ClassifiedNode(NamedTuple):
    """A node tagged with its kind, carrying the attribute-merged node."""

    kind: NodeKind
    node: Any


def _merged(node: Any, attribute_key: str) -> Mapping[str, Any] | None:
    merged = merge_attributes(node, attribute_key)
    if isinstance(merged, Mapping):
        return merged
    return None


def has_link_types(node: Any) -> bool:
    """
    Check that a merged node's link fields are usable as strings.

    ``href`` must be a string; ``rel`` and ``id`` must be strings when present.
    """
    if not isinstance(node, Mapping) or not isinstance(node.get("href"), str):
        return False
    return all(
        isinstance(node[field], str) for field in ("rel", "id") if field in node
    )


def is_link(node: Any, attribute_key: str = DEFAULT_ATTRIBUTE_KEY) -> bool:
    """A link has an href and at least one of rel or id."""
    merged = _merged(node, attribute_key)
    if merged is None:
        return False
    return "href" in merged and ("rel" in merged or "id" in merged)


def is_resource_link(node: Any, attribute_key: str = DEFAULT_ATTRIBUTE_KEY) -> bool:
    """A link whose href ends in a UUID-shaped identifier."""
    if not is_link(node, attribute_key):
        return False
    return has_resource_id(merge_attributes(node, attribute_key)["href"])


def is_collection_link(node: Any, attribute_key: str = DEFAULT_ATTRIBUTE_KEY) -> bool:
    """A link with a rel that does not point at a single resource."""
    if not is_link(node, attribute_key):
        return False
    if "rel" not in merge_attributes(node, attribute_key):
        return False
    return not is_resource_link(node, attribute_key)


def is_search_option(rel: Any) -> bool:
    return isinstance(rel, str) and SEARCH_OPTION_PATTERN.match(rel) is not None


def is_property(key: str) -> bool:
    """Top-level keys other than the link/action/special_objects sections."""
    return key not in RESERVED_KEYS


def classify_link(node: Any, attribute_key: str = DEFAULT_ATTRIBUTE_KEY) -> ClassifiedNode:
    """
    Classify an entry of a ``link`` list.

    Resource links take precedence over collection links, so a node is never
    both. Anything that is not a link, or whose link fields are not strings,
    is a plain property.
    """
    merged = merge_attributes(node, attribute_key)

    if not has_link_types(merged):
        return ClassifiedNode(NodeKind.PROPERTY, merged)

    if is_resource_link(merged, attribute_key):
        return ClassifiedNode(NodeKind.RESOURCE_LINK, merged)

    if is_collection_link(merged, attribute_key):
        if is_search_option(merged["rel"]):
            return ClassifiedNode(NodeKind.SEARCH_OPTION, merged)
        return ClassifiedNode(NodeKind.COLLECTION_LINK, merged)

    return ClassifiedNode(NodeKind.PROPERTY, merged)


def classify_special_object(
    node: Any, attribute_key: str = DEFAULT_ATTRIBUTE_KEY
) -> ClassifiedNode:
    """
    Classify an entry of the ``special_objects`` link list.

    Entries need a string href and a ``<collection>/<name>`` rel to qualify.
    """
    merged = merge_attributes(node, attribute_key)
    if not has_link_types(merged):
        return ClassifiedNode(NodeKind.PROPERTY, merged)

    rel = merged.get("rel")
    if (
        extract_special_object_collection(rel) is None
        or extract_special_object_name(rel) is None
    ):
        return ClassifiedNode(NodeKind.PROPERTY, merged)

    return ClassifiedNode(NodeKind.SPECIAL_OBJECT, merged)
