"""
Regex conventions for oVirt link relations and hrefs.

Every extractor returns None instead of raising when the input does not
have the expected shape.
"""

import re

# rel="vms/search"
SEARCH_OPTION_PATTERN = re.compile(r"^(\w+)/search$")

# rel="templates/blank": owning collection, then object name
SPECIAL_OBJECT_COLLECTION_PATTERN = re.compile(r"([\w/]+)/\w+$")
SPECIAL_OBJECT_NAME_PATTERN = re.compile(r"[\w/]+/(\w+)$")

# href="/ovirt-engine/api/vms?search={query}"
SEARCH_BASE_PATTERN = re.compile(r"^([\w/;{}=]+\?search=)")

# href ending in a UUID-shaped identifier
RESOURCE_ID_PATTERN = re.compile(r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+){4}$")


def _first_group(pattern: re.Pattern[str], value: object) -> str | None:
    if not isinstance(value, str):
        return None
    match = pattern.search(value)
    if match is None:
        return None
    return match.group(1)


def extract_search_option_name(rel: object) -> str | None:
    """Get the collection name a search relation belongs to ("vms/search" -> "vms")."""
    return _first_group(SEARCH_OPTION_PATTERN, rel)


def extract_special_object_collection(rel: object) -> str | None:
    """Get everything before the final segment of a special object relation."""
    return _first_group(SPECIAL_OBJECT_COLLECTION_PATTERN, rel)


def extract_special_object_name(rel: object) -> str | None:
    """Get the final segment of a special object relation."""
    return _first_group(SPECIAL_OBJECT_NAME_PATTERN, rel)


def extract_search_base(href: object) -> str | None:
    """
    Get the search href up to and including ``?search=``.

    Examples:
        "/api/vms?search={query}" -> "/api/vms?search="
    """
    return _first_group(SEARCH_BASE_PATTERN, href)


def has_resource_id(href: object) -> bool:
    """Check whether an href ends in a UUID-shaped identifier."""
    return isinstance(href, str) and RESOURCE_ID_PATTERN.search(href) is not None
