"""
API node: the object a hydration pass writes its results onto.
"""

from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from ovirt_hydrator.schemas.collection import Collection


@runtime_checkable
class ApiNodeLike(Protocol):
    """Anything with settable ``collections`` and ``properties``."""

    collections: dict[str, Collection]
    properties: dict[str, Any]


class ApiNode(BaseModel):
    """Default API node holding hydrated collections and properties."""

    collections: dict[str, Collection] = Field(default_factory=dict)
    properties: dict[str, Any] = Field(default_factory=dict)

    def get_collection(self, name: str) -> Collection | None:
        return self.collections.get(name)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a hydrated property."""
        return self.properties.get(key, default)
