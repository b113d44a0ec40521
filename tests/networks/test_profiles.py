"""Tests for network profiles."""

import pytest

from contract_builder.errors import UnknownNetworkError
from contract_builder.networks import NETWORK_PROFILES, NetworkConfigResolver, explorer_account_url


class TestNetworkProfiles:
    """Test the fixed network table."""

    @pytest.mark.parametrize("key, api, explorer, chain_id", [
        ("devnet", "https://devnet-api.multiversx.com",
         "https://devnet-explorer.multiversx.com", "D"),
        ("testnet", "https://testnet-api.multiversx.com",
         "https://testnet-explorer.multiversx.com", "T"),
        ("mainnet", "https://api.multiversx.com",
         "https://explorer.multiversx.com", "1"),
    ])
    def test_profile_values(self, key, api, explorer, chain_id):
        """Test endpoint URLs and chain ids of every network."""
        profile = NetworkConfigResolver().resolve(key)

        assert profile.key == key
        assert profile.api_url == api
        assert profile.explorer_url == explorer
        assert profile.chain_id == chain_id

    def test_gateway_urls(self):
        """Test gateway URLs follow the api naming."""
        assert NETWORK_PROFILES["mainnet"].gateway_url == "https://gateway.multiversx.com"
        assert NETWORK_PROFILES["devnet"].gateway_url == "https://devnet-gateway.multiversx.com"

    def test_table_is_read_only(self):
        """Test the profile table cannot be modified."""
        with pytest.raises(TypeError):
            NETWORK_PROFILES["localnet"] = NETWORK_PROFILES["devnet"]

    def test_explorer_account_url(self):
        """Test explorer links point at the accounts page."""
        url = explorer_account_url(NETWORK_PROFILES["testnet"], "erd1abc")
        assert url == "https://testnet-explorer.multiversx.com/accounts/erd1abc"


class TestNetworkConfigResolver:
    """Test key resolution."""

    def test_keys(self):
        """Test supported keys."""
        assert NetworkConfigResolver().keys() == ("devnet", "testnet", "mainnet")

    @pytest.mark.parametrize("key", ["localnet", "", "Mainnet", None])
    def test_unknown_key(self, key):
        """Test anything outside the table is rejected."""
        with pytest.raises(UnknownNetworkError) as exc_info:
            NetworkConfigResolver().resolve(key)

        assert str(exc_info.value) == f"Unknown network type: {key}"
        assert exc_info.value.supported == ["devnet", "testnet", "mainnet"]
        assert exc_info.value.recoverable is True
