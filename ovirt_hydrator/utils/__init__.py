"""
Utility modules for the oVirt hydrator.
"""

from ovirt_hydrator.utils.attributes import merge_attributes, strip_attributes
from ovirt_hydrator.utils.xml_to_hash import XMLToHashConverter, xml_to_hash

__all__ = ["merge_attributes", "strip_attributes", "XMLToHashConverter", "xml_to_hash"]
