"""
Pydantic models for hydration results.
"""

from ovirt_hydrator.schemas.api_node import ApiNode, ApiNodeLike
from ovirt_hydrator.schemas.collection import Collection
from ovirt_hydrator.schemas.resource import ResourceReference

__all__ = [
    "ApiNode",
    "ApiNodeLike",
    "Collection",
    "ResourceReference",
]
