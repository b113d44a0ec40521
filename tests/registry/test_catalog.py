"""Tests for the contract module catalog."""

import pytest

from contract_builder.errors import ComponentNotFoundError
from contract_builder.registry import ComponentRegistry, ContractModule, default_registry


class TestComponentRegistry:
    """Test registry lookups."""

    def test_builtin_ids_in_order(self, registry):
        """Test the built-in catalog order."""
        assert registry.ids() == (
            "meta-tx", "erc20", "access", "bridge-adapter", "gas-optimizer", "token-ratio", "nft"
        )

    def test_list_matches_ids(self, registry):
        """Test list() and ids() agree."""
        assert [module.id for module in registry.list()] == list(registry.ids())
        assert len(registry) == 7

    def test_get(self, registry):
        """Test get returns the module with name and description."""
        module = registry.get("erc20")

        assert module.name == "ESDT Token"
        assert module.description == "Standard ESDT with MultiversX optimizations"
        assert "pub trait EsdtToken" in module.source_template

    def test_get_unknown(self, registry):
        """Test unknown ids raise ComponentNotFoundError."""
        with pytest.raises(ComponentNotFoundError) as exc_info:
            registry.get("erc721")

        assert exc_info.value.component_id == "erc721"
        assert exc_info.value.code == "not_found"
        assert "nft" in exc_info.value.context["available"]

    def test_contains(self, registry):
        """Test membership by id."""
        assert "nft" in registry
        assert "dao" not in registry

    def test_every_template_declares_a_trait(self, registry):
        """Test each built-in module contributes a public trait."""
        for module in registry:
            assert "pub trait " in module.source_template, module.id

    def test_custom_catalog(self, token_module, roles_module):
        """Test a registry built from custom modules keeps their order."""
        custom = ComponentRegistry([roles_module, token_module])
        assert custom.ids() == ("roles", "token")

    def test_duplicate_ids_rejected(self, token_module):
        """Test a catalog with duplicate ids cannot be built."""
        with pytest.raises(ValueError, match="Duplicate module id"):
            ComponentRegistry([token_module, token_module])

    def test_modules_are_immutable(self, registry):
        """Test modules cannot be mutated."""
        with pytest.raises(AttributeError):
            registry.get("nft").name = "Other"

    def test_default_registry_shared(self):
        """Test default_registry returns the same instance."""
        assert default_registry() is default_registry()
        assert isinstance(default_registry().get("access"), ContractModule)
