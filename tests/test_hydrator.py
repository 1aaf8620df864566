"""
Tests for the Hydrator service.
"""

from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

import pytest

from ovirt_hydrator.exceptions import InvalidTargetError, XMLConversionError
from ovirt_hydrator.schemas.api_node import ApiNode
from ovirt_hydrator.schemas.resource import ResourceReference
from ovirt_hydrator.services.hydrator import HydratorService, root_name, unfold

from tests.helpers import BLANK_ID, USER_ID, attr


class TestRootUnfolding:
    """Tests for root wrapper detection."""

    def test_single_key_wrapper(self):
        """Test a single non-list key is the root."""
        raw = {"api": {"name": "x"}}

        assert root_name(raw) == "api"
        assert unfold(raw) == {"name": "x"}

    def test_single_key_list_not_unfolded(self):
        """Test a single key holding a list is the payload itself."""
        raw = {"vm": [{"name": "a"}, {"name": "b"}]}

        assert root_name(raw) is None
        assert unfold(raw) is raw

    def test_multiple_keys(self):
        """Test a hash with several keys is not wrapped."""
        raw = {"name": "x", "link": []}

        assert root_name(raw) is None
        assert unfold(raw) is raw

    def test_non_mapping(self):
        """Test non-mapping input is returned unchanged."""
        assert root_name(["x"]) is None
        assert unfold("x") == "x"

    def test_unfold_idempotent_after_wrapper_removed(self):
        """Test unfolding twice equals unfolding once for wrapped payloads."""
        raw = {"api": {"name": "x", "link": []}}

        once = unfold(raw)

        assert unfold(once) == once


class TestHydrate:
    """End-to-end hydration tests."""

    def test_collections_and_properties(self, hydrator):
        """Test collections with search and special objects plus properties."""
        raw = {
            "link": [
                {"href": "/api/vms", "rel": "vms"},
                {"href": "/api/vms?search={query}", "rel": "vms/search"},
            ],
            "special_objects": [
                {"link": [{"href": "/api/vms/export", "rel": "vms/export"}]},
            ],
            "name": "value",
        }

        node = hydrator.hydrate("api", raw)

        collections = {
            name: collection.model_dump(by_alias=True, exclude={"name"})
            for name, collection in node.collections.items()
        }
        assert collections == {
            "vms": {
                "href": "/api/vms",
                "search": "/api/vms?search={query}",
                "specialObjects": {"export": "/api/vms/export"},
            }
        }
        assert node.properties == {"name": "value"}

    def test_root_wrapped_equals_unwrapped(self, hydrator):
        """Test a root-wrapped hash hydrates like its inner value."""
        inner = {
            "link": [attr(href="/api/vms", rel="vms")],
            "name": "x",
        }

        wrapped = hydrator.hydrate("api", {"api": inner})
        unwrapped = hydrator.hydrate("api", inner)

        assert wrapped.model_dump() == unwrapped.model_dump()

    def test_unknown_special_object_collection_dropped(self, hydrator, raw_api_root):
        """Test a special object for a missing collection is silently dropped."""
        raw_api_root["api"]["special_objects"][0]["link"].insert(
            0, attr(href=f"/api/tags/{BLANK_ID}", rel="tags/root")
        )

        node = hydrator.hydrate("api", raw_api_root)

        assert set(node.collections) == {"vms", "hosts"}
        assert node.collections["vms"].special_objects == {"export": "/api/vms/export"}
        assert node.properties == {
            "product_info": {"name": "oVirt Engine", "vendor": "ovirt.org"}
        }

    def test_raw_hash_not_mutated(self, hydrator, raw_api_root):
        """Test the caller's hash is left untouched."""
        before = repr(raw_api_root)

        hydrator.hydrate("api", raw_api_root)

        assert repr(raw_api_root) == before

    def test_no_link_section(self, hydrator):
        """Test responses without links have no collections."""
        node = hydrator.hydrate("api", {"vm": {"name": "a", "status": "up"}})

        assert node.collections == {}
        assert node.properties == {"name": "a", "status": "up"}

    def test_mistyped_links_do_not_abort(self, hydrator):
        """Test links with non-string fields are skipped and hydration completes."""
        raw = {
            "link": [
                attr(href=None, rel="vms"),
                attr(href="/api/hosts", rel=["hosts"]),
                attr(href="/api/templates", rel="templates"),
            ],
            "special_objects": [
                {
                    "link": [
                        attr(href=None, rel="templates/blank"),
                        attr(href=f"/api/templates/{BLANK_ID}", rel="templates/base"),
                    ]
                }
            ],
            "name": "engine",
        }

        node = hydrator.hydrate("api", raw)

        assert set(node.collections) == {"templates"}
        assert node.collections["templates"].special_objects == {
            "base": f"/api/templates/{BLANK_ID}"
        }
        assert node.properties == {"name": "engine"}

    def test_existing_instance_returned(self, hydrator, raw_api_root):
        """Test an existing node is filled in place and returned."""
        node = ApiNode()

        result = hydrator.hydrate(node, raw_api_root)

        assert result is node
        assert "vms" in node.collections

    def test_fresh_results_per_call(self, hydrator, raw_api_root):
        """Test a second pass replaces rather than accumulates."""
        node = ApiNode()
        hydrator.hydrate(node, raw_api_root)

        hydrator.hydrate(node, {"link": [attr(href="/api/hosts", rel="hosts")]})

        assert set(node.collections) == {"hosts"}
        assert node.properties == {}

    def test_duck_typed_target(self, hydrator, raw_api_root):
        """Test any object with collections and properties is accepted."""
        target = SimpleNamespace(collections=None, properties=None)

        hydrator.hydrate(target, raw_api_root)

        assert "vms" in target.collections
        assert target.properties["product_info"]["vendor"] == "ovirt.org"

    def test_invalid_target(self, hydrator, raw_api_root):
        """Test an unusable target raises a type error."""
        with pytest.raises(InvalidTargetError):
            hydrator.hydrate(42, raw_api_root)

        with pytest.raises(TypeError):
            hydrator.hydrate("no-such-node", raw_api_root)

    def test_concurrent_hydration(self, hydrator):
        """Test one service instance serves parallel calls independently."""

        def run(index):
            raw = {"link": [attr(href=f"/api/c{index}", rel=f"c{index}")], "n": index}
            return hydrator.hydrate("api", raw)

        with ThreadPoolExecutor(max_workers=8) as pool:
            nodes = list(pool.map(run, range(32)))

        for index, node in enumerate(nodes):
            assert list(node.collections) == [f"c{index}"]
            assert node.properties == {"n": index}


class TestHydrateXML:
    """Tests for hydration straight from XML."""

    def test_api_root(self, hydrator, api_root_xml):
        """Test a realistic API root document."""
        node = hydrator.hydrate_xml("api", api_root_xml)

        assert set(node.collections) == {"vms", "templates"}

        templates = node.collections["templates"]
        assert templates.href == "/ovirt-engine/api/templates"
        assert templates.search_href == "/ovirt-engine/api/templates?search={query}"
        assert templates.special_objects == {
            "blank": f"/ovirt-engine/api/templates/{BLANK_ID}"
        }

        assert node.properties["product_info"] == {
            "name": "oVirt Engine",
            "vendor": "ovirt.org",
            "version": {"major": "4", "minor": "5", "build": "0", "revision": "0"},
        }
        assert node.properties["summary"] == {"vms": {"total": "5", "active": "2"}}
        assert node.properties["time"] == "2026-10-18T10:00:00.000+02:00"

        user = node.properties["authenticated_user"]
        assert isinstance(user, ResourceReference)
        assert user.id == USER_ID

        assert "link" not in node.properties
        assert "special_objects" not in node.properties

    def test_malformed_xml(self, hydrator):
        """Test malformed documents raise."""
        with pytest.raises(XMLConversionError):
            hydrator.hydrate_xml("api", "<api><link></api>")


class TestHydratorConfiguration:
    """Tests for service configuration."""

    def test_custom_attribute_key(self):
        """Test the attribute key is used throughout the pipeline."""
        hydrator = HydratorService(attribute_key="_attrs")
        raw = {
            "link": [{"_attrs": {"href": "/api/vms", "rel": "vms"}}],
            "version": {"_attrs": {"major": "4"}},
        }

        node = hydrator.hydrate("api", raw)

        assert node.collections["vms"].href == "/api/vms"
        assert node.properties == {"version": {"major": "4"}}

    def test_resource_matcher_passed_through(self):
        """Test inline resource recognition is configurable."""
        hydrator = HydratorService(
            resource_matcher=lambda node: "status" in node,
            resource_factory=lambda node: node["status"],
        )

        node = hydrator.hydrate("api", {"vm": {"name": "a"}, "host": {"status": "up"}})

        assert node.properties == {"vm": {"name": "a"}, "host": "up"}
