# oVirt API Hydrator
"""
Client-side hydration of oVirt REST API responses.

Converts the attribute-tagged hash of an XML response into collections,
resource references, special object shortcuts and plain properties,
using only structural conventions on ``rel`` and ``href``.

Architecture:
- Utils: attribute merging, rel/href patterns, XML-to-hash conversion
- Services: classification, collection building, property hydration
- Clients: httpx-based engine API client
"""

from ovirt_hydrator.exceptions import HydrationError, InvalidTargetError
from ovirt_hydrator.schemas import ApiNode, Collection, ResourceReference
from ovirt_hydrator.services import HydratorService, register_node_type

__version__ = "1.0.0"

__all__ = [
    "ApiNode",
    "Collection",
    "ResourceReference",
    "HydratorService",
    "HydrationError",
    "InvalidTargetError",
    "register_node_type",
]
