"""
Collection building from top-level API links.

Top-level ``link`` entries name the collections of the API root, plus
``<name>/search`` entries carrying the search template of a collection.
Special objects (e.g. ``templates/blank``) are bound afterwards as named
shortcuts on the collection they belong to.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ovirt_hydrator.config import DEFAULT_ATTRIBUTE_KEY
from ovirt_hydrator.schemas.collection import Collection
from ovirt_hydrator.services.classifier import (
    NodeKind,
    classify_link,
    classify_special_object,
)
from ovirt_hydrator.utils.patterns import (
    extract_search_option_name,
    extract_special_object_collection,
    extract_special_object_name,
)

logger = logging.getLogger(__name__)


class CollectionBuilder:
    """
    Builds collection descriptors from the top-level link list.

    Duplicate collection names are last-write-wins. Search options whose
    collection does not exist are dropped.
    """

    def __init__(self, attribute_key: str = DEFAULT_ATTRIBUTE_KEY):
        self.attribute_key = attribute_key

    def build(self, links: Any) -> dict[str, Collection]:
        """
        Build collections from a ``link`` section.

        Args:
            links: Value of the ``link`` key; anything but a list is empty

        Returns:
            Mapping of collection name to descriptor
        """
        if not isinstance(links, list):
            return {}

        hrefs: dict[str, str] = {}
        searchabilities: dict[str, str] = {}

        for entry in links:
            classified = classify_link(entry, self.attribute_key)

            if classified.kind is NodeKind.SEARCH_OPTION:
                name = extract_search_option_name(classified.node["rel"])
                searchabilities[name] = classified.node["href"]
            elif classified.kind is NodeKind.COLLECTION_LINK:
                hrefs[classified.node["rel"]] = classified.node["href"]

        collections = {
            name: Collection(name=name, href=href) for name, href in hrefs.items()
        }

        for name, href in searchabilities.items():
            collection = collections.get(name)
            if collection is None:
                logger.debug(f"Dropping search option for unknown collection: {name}")
                continue
            collection.set_search_option(href)

        return collections


class SpecialObjectBinder:
    """
    Attaches special objects to already-built collections.

    Best effort: entries with an unexpected rel or an unknown owning
    collection are skipped without affecting the rest.
    """

    def __init__(self, attribute_key: str = DEFAULT_ATTRIBUTE_KEY):
        self.attribute_key = attribute_key

    def _special_links(self, special_objects: Any) -> list[Any]:
        # <special_objects> is itself a list whose first entry holds the links
        if not isinstance(special_objects, list) or not special_objects:
            return []
        first = special_objects[0]
        if not isinstance(first, Mapping):
            return []
        links = first.get("link")
        if not isinstance(links, list):
            return []
        return links

    def bind(self, collections: dict[str, Collection], special_objects: Any) -> int:
        """
        Bind special objects onto collections in place.

        Args:
            collections: Collections built for the same response
            special_objects: Value of the ``special_objects`` key

        Returns:
            Number of special objects bound
        """
        bound = 0
        for entry in self._special_links(special_objects):
            classified = classify_special_object(entry, self.attribute_key)
            if classified.kind is not NodeKind.SPECIAL_OBJECT:
                logger.debug(f"Skipping malformed special object: {entry!r}")
                continue

            rel = classified.node["rel"]
            owner = extract_special_object_collection(rel)
            name = extract_special_object_name(rel)

            collection = collections.get(owner)
            if collection is None:
                logger.debug(f"Skipping special object {rel}: no collection {owner}")
                continue

            collection.add_special_object(name, classified.node["href"])
            bound += 1

        return bound
