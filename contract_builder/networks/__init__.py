"""
Network profiles module.

Fixed endpoint bundles for the supported deployment targets.
"""
from .profiles import NETWORK_PROFILES, NetworkConfigResolver, NetworkProfile, explorer_account_url

__all__ = ["NETWORK_PROFILES", "NetworkConfigResolver", "NetworkProfile", "explorer_account_url"]
