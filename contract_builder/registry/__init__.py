"""
Contract module registry.

Static catalog of the reusable capability modules a contract is built from.
"""
from .catalog import ComponentRegistry, ContractModule, default_registry

__all__ = ["ComponentRegistry", "ContractModule", "default_registry"]
