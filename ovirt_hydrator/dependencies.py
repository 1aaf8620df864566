"""
Factory functions for settings-configured service instances.
"""

from functools import lru_cache

from ovirt_hydrator.clients.ovirt_client import OvirtClient
from ovirt_hydrator.config import get_settings
from ovirt_hydrator.services.hydrator import HydratorService


@lru_cache
def get_hydrator() -> HydratorService:
    """Get cached hydrator service instance."""
    settings = get_settings()
    return HydratorService(
        attribute_key=settings.attribute_key,
        text_key=settings.text_key,
        max_depth=settings.max_depth,
        force_list=settings.force_list_tags,
    )


def get_client() -> OvirtClient:
    """
    Get a new API client configured from settings.

    Clients own a connection pool, so each caller gets its own and is
    responsible for closing it.
    """
    settings = get_settings()
    return OvirtClient(
        base_url=settings.api_url,
        username=settings.username,
        password=settings.password,
        verify_ssl=settings.verify_ssl,
        timeout=settings.timeout,
        hydrator=get_hydrator(),
    )
