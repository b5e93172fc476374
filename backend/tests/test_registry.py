"""
Camp API Backend: Registry Unit Tests
======================================

What:  Registration, lookup and validation of (version, collection) entries.
"""

import pytest

from camp_api.exceptions import NotFoundError, RegistryError
from camp_api.models import Camper, Campsite
from camp_api.registry import ApiRegistry, build_default_registry
from camp_api.serializers import camper_serializer, campsite_serializer


class TestDefaultRegistry:

    def test_registers_v1_collections(self):
        registry = build_default_registry()

        assert len(registry) == 2
        assert ("v1", "campers") in registry
        assert ("v1", "campsites") in registry
        assert registry.versions() == ("v1",)

    def test_camper_resource(self):
        resource = build_default_registry().get("v1", "campers")

        assert resource.model is Camper
        assert resource.serializer is camper_serializer
        assert resource.path == "/api/v1/campers"

    def test_resources_keep_registration_order(self):
        resources = build_default_registry().resources("v1")
        assert [r.collection for r in resources] == ["campers", "campsites"]


class TestRegister:

    def setup_method(self):
        self.registry = ApiRegistry()

    def test_duplicate_rejected(self):
        self.registry.register("v1", "campers", Camper, camper_serializer)

        with pytest.raises(RegistryError, match="already registered"):
            self.registry.register("v1", "campers", Camper, camper_serializer)

    def test_same_collection_in_two_versions(self):
        self.registry.register("v1", "campers", Camper, camper_serializer)
        self.registry.register("v2", "campers", Camper, camper_serializer)

        assert self.registry.versions() == ("v1", "v2")
        assert self.registry.get("v2", "campers").path == "/api/v2/campers"

    @pytest.mark.parametrize("version", ["", "V1", "v1/beta", "v 1"])
    def test_invalid_version(self, version):
        with pytest.raises(RegistryError, match="Invalid version"):
            self.registry.register(version, "campers", Camper, camper_serializer)

    def test_invalid_collection(self):
        with pytest.raises(RegistryError, match="Invalid collection"):
            self.registry.register("v1", "camp/ers", Camper, camper_serializer)

    def test_unknown_lookup(self):
        self.registry.register("v1", "campsites", Campsite, campsite_serializer)

        with pytest.raises(NotFoundError):
            self.registry.get("v1", "campers")

    def test_resources_of_unknown_version_is_empty(self):
        assert self.registry.resources("v9") == ()
