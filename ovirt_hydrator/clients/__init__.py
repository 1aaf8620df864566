"""
HTTP clients for the oVirt engine API.
"""

from ovirt_hydrator.clients.ovirt_client import OvirtClient

__all__ = ["OvirtClient"]
