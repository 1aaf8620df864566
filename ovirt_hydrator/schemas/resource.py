"""
Reference to a single addressable API resource.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class ResourceReference(BaseModel):
    """
    Unfetched pointer to a resource, identified by href and id.

    Any further fields of the link (rel, name, ...) are kept as extras.
    Inline resource bodies arrive here already hydrated, without attribute
    maps or link/action sections.
    """

    model_config = ConfigDict(extra="allow")

    href: str
    id: str | None = None
    rel: str | None = None

    @classmethod
    def from_link(cls, node: Mapping[str, Any]) -> "ResourceReference":
        """Build a reference from an attribute-merged link node."""
        return cls.model_validate(dict(node))
