"""
Property hydration for everything that is not a top-level link section.
"""

from collections.abc import Callable, Mapping
from typing import Any

from ovirt_hydrator.config import DEFAULT_ATTRIBUTE_KEY, RESERVED_KEYS
from ovirt_hydrator.exceptions import HydrationDepthError
from ovirt_hydrator.schemas.resource import ResourceReference
from ovirt_hydrator.services.classifier import (
    has_link_types,
    is_property,
    is_resource_link,
)
from ovirt_hydrator.utils.attributes import get_attributes, merge_attributes, strip_keys

ResourceMatcher = Callable[[Mapping[str, Any]], bool]
ResourceFactory = Callable[[Mapping[str, Any]], Any]


class PropertyHydrator:
    """
    Recursively converts raw values into hydrated property values.

    The conversion per value:
    1. Lists are hydrated element by element (single-element lists stay lists)
    2. Resource links become ResourceReference instances, their other
       children hydrated like any mapping
    3. Inline resource bodies go to ``resource_factory``, if a
       ``resource_matcher`` is configured to recognise them
    4. Other mappings get their attributes merged and their link/action/
       special_objects sections stripped, then each value is hydrated
    5. Scalars are returned unchanged
    """

    def __init__(
        self,
        attribute_key: str = DEFAULT_ATTRIBUTE_KEY,
        max_depth: int = 64,
        resource_matcher: ResourceMatcher | None = None,
        resource_factory: ResourceFactory | None = None,
    ):
        if resource_matcher is not None and resource_factory is None:
            raise ValueError("resource_factory is required with resource_matcher")

        self.attribute_key = attribute_key
        self.max_depth = max_depth
        self.resource_matcher = resource_matcher
        self.resource_factory = resource_factory

    def get_hydrated_properties(self, raw: Any) -> dict[str, Any]:
        """
        Hydrate the plain properties of a response.

        Args:
            raw: Unfolded response

        Returns:
            Property name to hydrated value, with the top-level attribute
            map merged in
        """
        if not isinstance(raw, Mapping):
            return {}

        properties = {
            key: self.hydrate(value, _depth=1)
            for key, value in raw.items()
            if is_property(key) and key != self.attribute_key
        }
        properties.update(get_attributes(raw, self.attribute_key))
        return properties

    def is_resource(self, node: Mapping[str, Any]) -> bool:
        """Check whether a node is an inline resource body."""
        if self.resource_matcher is None:
            return False
        return bool(self.resource_matcher(node))

    def hydrate(self, value: Any, _depth: int = 0) -> Any:
        """
        Hydrate a single raw value.

        Raises:
            HydrationDepthError: If nesting exceeds ``max_depth``
        """
        if _depth > self.max_depth:
            raise HydrationDepthError(self.max_depth)

        if isinstance(value, list):
            return [self.hydrate(item, _depth + 1) for item in value]

        if isinstance(value, Mapping):
            merged = merge_attributes(value, self.attribute_key)

            if has_link_types(merged) and is_resource_link(merged, self.attribute_key):
                return ResourceReference.from_link(self._hydrate_mapping(merged, _depth))

            if self.is_resource(merged):
                return self.resource_factory(merged)

            return self._hydrate_mapping(merged, _depth)

        return value

    def _hydrate_mapping(self, node: Mapping[str, Any], depth: int) -> dict[str, Any]:
        stripped = strip_keys(node, RESERVED_KEYS)
        return {key: self.hydrate(value, depth + 1) for key, value in stripped.items()}
