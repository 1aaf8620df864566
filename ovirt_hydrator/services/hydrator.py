"""
Hydrator Service for oVirt API responses.

Turns the raw hash of an API response into collections and properties
on an API node. The service keeps no per-call state: target and raw hash
are passed to every call, so one instance can serve concurrent callers.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ovirt_hydrator.config import DEFAULT_ATTRIBUTE_KEY, DEFAULT_TEXT_KEY
from ovirt_hydrator.schemas.api_node import ApiNodeLike
from ovirt_hydrator.schemas.collection import Collection
from ovirt_hydrator.services.collection_builder import (
    CollectionBuilder,
    SpecialObjectBinder,
)
from ovirt_hydrator.services.properties import (
    PropertyHydrator,
    ResourceFactory,
    ResourceMatcher,
)
from ovirt_hydrator.services.targets import resolve_target
from ovirt_hydrator.utils.xml_to_hash import DEFAULT_FORCE_LIST, XMLToHashConverter

logger = logging.getLogger(__name__)


def root_name(raw: Any) -> str | None:
    """
    Get the name of a single wrapping root key.

    A hash with exactly one key whose value is not a list is a wrapper
    left by XML conversion. A single key holding a list is the payload
    itself and is not unwrapped.
    """
    if not isinstance(raw, Mapping) or len(raw) != 1:
        return None
    name, value = next(iter(raw.items()))
    if isinstance(value, list):
        return None
    return name


def unfold(raw: Any) -> Any:
    """Strip the root wrapper from a raw hash, if it has one."""
    name = root_name(raw)
    if name is None:
        return raw
    return raw[name]


class HydratorService:
    """
    Service for hydrating API nodes from raw response hashes.

    The hydration process:
    1. Unfold the root wrapper element
    2. Build collections from the top-level links
    3. Bind special objects onto those collections
    4. Hydrate all remaining properties
    5. Export collections and properties onto the target node
    """

    def __init__(
        self,
        attribute_key: str = DEFAULT_ATTRIBUTE_KEY,
        text_key: str = DEFAULT_TEXT_KEY,
        max_depth: int = 64,
        force_list: Iterable[str] = DEFAULT_FORCE_LIST,
        resource_matcher: ResourceMatcher | None = None,
        resource_factory: ResourceFactory | None = None,
    ):
        self.attribute_key = attribute_key
        self.collection_builder = CollectionBuilder(attribute_key)
        self.special_object_binder = SpecialObjectBinder(attribute_key)
        self.property_hydrator = PropertyHydrator(
            attribute_key=attribute_key,
            max_depth=max_depth,
            resource_matcher=resource_matcher,
            resource_factory=resource_factory,
        )
        self.converter = XMLToHashConverter(
            attribute_key=attribute_key,
            text_key=text_key,
            force_list=force_list,
        )

    def hydrate(self, target: Any, raw: Any) -> ApiNodeLike:
        """
        Hydrate a target node from a raw response hash.

        Args:
            target: Node type name, node constructor or API node instance
            raw: Raw hash, optionally wrapped in its root element

        Returns:
            The resolved target with ``collections`` and ``properties`` set

        Raises:
            InvalidTargetError: If the target is not usable as an API node
            HydrationDepthError: If the response nests too deeply
        """
        node = resolve_target(target)

        name = root_name(raw)
        if name is not None:
            logger.info(f"Hydrating <{name}> response")
        unfolded = unfold(raw)

        collections = self.get_collections(unfolded)
        properties = self.get_properties(unfolded)

        node.collections = collections
        node.properties = properties

        logger.debug(
            f"Hydrated {len(collections)} collections and {len(properties)} properties"
        )
        return node

    def hydrate_xml(self, target: Any, xml: str | bytes) -> ApiNodeLike:
        """
        Hydrate a target node from an XML document.

        Raises:
            XMLConversionError: If the document is not well-formed
        """
        return self.hydrate(target, self.converter.convert(xml))

    def get_collections(self, unfolded: Any) -> dict[str, Collection]:
        """
        Build collections, with special objects bound, from an unfolded hash.

        Missing or malformed ``link`` and ``special_objects`` sections yield
        no collections or no special objects respectively.
        """
        if not isinstance(unfolded, Mapping):
            return {}

        collections = self.collection_builder.build(unfolded.get("link"))
        bound = self.special_object_binder.bind(
            collections, unfolded.get("special_objects")
        )
        if bound:
            logger.debug(f"Bound {bound} special objects")
        return collections

    def get_properties(self, unfolded: Any) -> dict[str, Any]:
        return self.property_hydrator.get_hydrated_properties(unfolded)
