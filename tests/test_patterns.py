"""
Tests for rel/href pattern extraction.
"""

import pytest

from ovirt_hydrator.utils.patterns import (
    extract_search_base,
    extract_search_option_name,
    extract_special_object_collection,
    extract_special_object_name,
    has_resource_id,
)


class TestSearchOption:
    """Tests for search option names."""

    def test_search_rel(self):
        """Test vms/search yields vms."""
        assert extract_search_option_name("vms/search") == "vms"

    def test_plain_rel(self):
        """Test a plain collection rel is not a search option."""
        assert extract_search_option_name("vms") is None

    def test_nested_search_rel(self):
        """Test a two-segment prefix does not match."""
        assert extract_search_option_name("vms/disks/search") is None

    def test_non_string(self):
        """Test non-string input yields no match."""
        assert extract_search_option_name(None) is None
        assert extract_search_option_name({"rel": "vms/search"}) is None


class TestSpecialObject:
    """Tests for special object rel parsing."""

    def test_collection_and_name(self):
        """Test templates/blank splits into owner and name."""
        assert extract_special_object_collection("templates/blank") == "templates"
        assert extract_special_object_name("templates/blank") == "blank"

    def test_multi_segment_owner(self):
        """Test the owner is everything before the last segment."""
        assert extract_special_object_collection("a/b/c") == "a/b"
        assert extract_special_object_name("a/b/c") == "c"

    def test_single_segment(self):
        """Test a rel without a slash yields no match."""
        assert extract_special_object_collection("blank") is None
        assert extract_special_object_name("blank") is None


class TestSearchBase:
    """Tests for search href base extraction."""

    def test_search_base(self):
        """Test the base includes the search parameter."""
        assert extract_search_base("/api/vms?search={query}") == "/api/vms?search="

    def test_matrix_parameters(self):
        """Test matrix parameters are part of the base."""
        assert (
            extract_search_base("/api/events;from={event_id}?search={query}")
            == "/api/events;from={event_id}?search="
        )

    def test_no_search(self):
        """Test an href without a search parameter."""
        assert extract_search_base("/api/vms") is None


class TestResourceId:
    """Tests for resource identifier detection."""

    @pytest.mark.parametrize(
        "href",
        [
            "/api/vms/123e4567-e89b-12d3-a456-426614174000",
            "/ovirt-engine/api/templates/00000000-0000-0000-0000-000000000000",
        ],
    )
    def test_uuid_suffix(self, href):
        """Test hrefs ending in a UUID."""
        assert has_resource_id(href)

    @pytest.mark.parametrize(
        "href",
        [
            "/api/vms",
            "/ovirt-engine/api/vms",
            "/api/vms?search={query}",
            "/api/vms/123e4567-e89b-12d3-a456-426614174000/disks",
        ],
    )
    def test_no_uuid_suffix(self, href):
        """Test collection hrefs are not resource hrefs."""
        assert not has_resource_id(href)

    def test_non_string(self):
        """Test non-string hrefs."""
        assert not has_resource_id(None)
