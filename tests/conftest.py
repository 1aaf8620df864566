"""
Shared fixtures for hydrator tests.
"""

import pytest

from ovirt_hydrator.services.hydrator import HydratorService

from tests.helpers import API_ROOT_XML, attr


@pytest.fixture
def api_root_xml() -> str:
    return API_ROOT_XML


@pytest.fixture
def hydrator() -> HydratorService:
    return HydratorService()


@pytest.fixture
def raw_api_root() -> dict:
    """The shape of /api after XML-to-hash conversion."""
    return {
        "api": {
            "link": [
                attr(href="/api/vms", rel="vms"),
                attr(href="/api/vms?search={query}", rel="vms/search"),
                attr(href="/api/hosts", rel="hosts"),
            ],
            "special_objects": [
                {"link": [attr(href="/api/vms/export", rel="vms/export")]},
            ],
            "product_info": {"name": "oVirt Engine", "vendor": "ovirt.org"},
        }
    }
