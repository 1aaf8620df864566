"""
Hydration services for oVirt API responses.

Pipeline:
- Classifier: structural link/property classification
- Collection builder: collections, search options and special objects
- Property hydrator: recursive conversion of plain data
- Hydrator: orchestration and export onto an API node
"""

from ovirt_hydrator.services.collection_builder import CollectionBuilder, SpecialObjectBinder
from ovirt_hydrator.services.hydrator import HydratorService, root_name, unfold
from ovirt_hydrator.services.properties import PropertyHydrator
from ovirt_hydrator.services.targets import register_node_type, resolve_target

__all__ = [
    "CollectionBuilder",
    "SpecialObjectBinder",
    "PropertyHydrator",
    "HydratorService",
    "root_name",
    "unfold",
    "register_node_type",
    "resolve_target",
]
