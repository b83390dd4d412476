"""Tests for the endpoint registry."""

import pytest

from switchinator.errors import ConfigError
from switchinator.registry import Endpoint, EndpointRegistry


class TestEndpointRegistryFind:
    """Tests for name lookup."""

    def test_find_exact_name(self, registry):
        """Test finding a registered name."""
        endpoint = registry.find("reasoning")

        assert endpoint is not None
        assert endpoint.name == "reasoning"

    @pytest.mark.parametrize("name", ["REASONING", "Reasoning", "rEaSoNiNg"])
    def test_find_is_case_insensitive(self, registry, name):
        """Test that lookup ignores case."""
        assert registry.find(name) == registry.find("reasoning")

    @pytest.mark.parametrize("name", ["unknownbot", "reason", "reasoning2", " reasoning"])
    def test_find_unregistered_returns_none(self, registry, name):
        """Test that there is no partial or fuzzy matching."""
        assert registry.find(name) is None

    def test_find_empty_returns_none(self, registry):
        """Test empty and missing names."""
        assert registry.find("") is None
        assert registry.find(None) is None


class TestEndpointRegistryListing:
    """Tests for name enumeration."""

    def test_names_in_registration_order(self):
        """Test that names keep registration order."""
        registry = EndpointRegistry([
            Endpoint("zeta", "http://z"),
            Endpoint("alpha", "http://a"),
            Endpoint("mid", "http://m"),
        ])

        assert registry.names() == ["zeta", "alpha", "mid"]
        assert registry.listing() == "zeta, alpha, mid"

    def test_iter_and_len(self, registry):
        """Test iterating over endpoints."""
        assert len(registry) == 2
        assert [e.name for e in registry] == ["reasoning", "assistant"]

    def test_duplicate_names_rejected(self):
        """Test that names differing only by case are rejected."""
        with pytest.raises(ConfigError):
            EndpointRegistry([
                Endpoint("reasoning", "http://a"),
                Endpoint("Reasoning", "http://b"),
            ])

    def test_endpoint_is_immutable(self):
        """Test that endpoints cannot be modified after creation."""
        endpoint = Endpoint("reasoning", "http://a")

        with pytest.raises(AttributeError):
            endpoint.url = "http://evil"
