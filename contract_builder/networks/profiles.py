"""
Network profile table and resolver.

The table is fixed: three MultiversX environments keyed devnet, testnet and
mainnet. Lookups are pure and safe for unsynchronized concurrent reads.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownNetworkError


@dataclass(frozen=True)
class NetworkProfile:
    """Endpoint URLs and chain identifier for one deployment target."""

    key: str
    display_name: str
    api_url: str
    gateway_url: str
    explorer_url: str
    chain_id: str


NETWORK_PROFILES: Mapping[str, NetworkProfile] = MappingProxyType({
    "devnet": NetworkProfile(
        key="devnet",
        display_name="MultiversX Devnet",
        api_url="https://devnet-api.multiversx.com",
        gateway_url="https://devnet-gateway.multiversx.com",
        explorer_url="https://devnet-explorer.multiversx.com",
        chain_id="D",
    ),
    "testnet": NetworkProfile(
        key="testnet",
        display_name="MultiversX Testnet",
        api_url="https://testnet-api.multiversx.com",
        gateway_url="https://testnet-gateway.multiversx.com",
        explorer_url="https://testnet-explorer.multiversx.com",
        chain_id="T",
    ),
    "mainnet": NetworkProfile(
        key="mainnet",
        display_name="MultiversX Mainnet",
        api_url="https://api.multiversx.com",
        gateway_url="https://gateway.multiversx.com",
        explorer_url="https://explorer.multiversx.com",
        chain_id="1",
    ),
})


def explorer_account_url(profile: NetworkProfile, address: str) -> str:
    """Explorer page of an account or contract address."""
    return f"{profile.explorer_url}/accounts/{address}"


class NetworkConfigResolver:
    """Maps a network key to its profile."""

    def __init__(self, profiles: Mapping[str, NetworkProfile] = NETWORK_PROFILES):
        self._profiles = profiles

    def resolve(self, key: str) -> NetworkProfile:
        """Return the profile for key, raising UnknownNetworkError otherwise."""
        profile = self._profiles.get(key) if isinstance(key, str) else None
        if profile is None:
            raise UnknownNetworkError(
                f"Unknown network type: {key}",
                network_key=key,
                supported=list(self._profiles)
            )
        return profile

    def keys(self) -> tuple[str, ...]:
        return tuple(self._profiles)

    def profiles(self) -> tuple[NetworkProfile, ...]:
        return tuple(self._profiles.values())
