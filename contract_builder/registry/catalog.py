"""
Static catalog of contract modules.

Modules are defined once at import time and never mutated. The registry is
read-only, so concurrent readers need no coordination.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from ..errors import ComponentNotFoundError
from . import templates


@dataclass(frozen=True)
class ContractModule:
    """A reusable, named contract source fragment contributing one capability."""

    id: str
    name: str
    description: str
    source_template: str


DEFAULT_MODULES: tuple[ContractModule, ...] = (
    ContractModule(
        id="meta-tx",
        name="Meta Transaction",
        description="Enable gasless transactions with MultiversX support",
        source_template=templates.META_TX,
    ),
    ContractModule(
        id="erc20",
        name="ESDT Token",
        description="Standard ESDT with MultiversX optimizations",
        source_template=templates.ESDT_TOKEN,
    ),
    ContractModule(
        id="access",
        name="Access Control",
        description="Role-based access management",
        source_template=templates.ACCESS_CONTROL,
    ),
    ContractModule(
        id="bridge-adapter",
        name="Bridge Adapter",
        description="Cross-chain bridge integration for token transfers",
        source_template=templates.BRIDGE_ADAPTER,
    ),
    ContractModule(
        id="gas-optimizer",
        name="Gas Optimizer",
        description="MultiversX-specific gas optimization utilities",
        source_template=templates.GAS_OPTIMIZER,
    ),
    ContractModule(
        id="token-ratio",
        name="Token Ratio Handler",
        description="Manages MultiversX token ratios for fees",
        source_template=templates.TOKEN_RATIO,
    ),
    ContractModule(
        id="nft",
        name="NFT Contract",
        description="NFT implementation with MultiversX optimizations",
        source_template=templates.NFT,
    ),
)


class ComponentRegistry:
    """Ordered, immutable lookup of contract modules by id."""

    def __init__(self, modules: Optional[Iterable[ContractModule]] = None):
        ordered = tuple(DEFAULT_MODULES if modules is None else modules)

        by_id: dict[str, ContractModule] = {}
        for module in ordered:
            if module.id in by_id:
                raise ValueError(f"Duplicate module id in catalog: {module.id}")
            by_id[module.id] = module

        self._modules = ordered
        self._by_id = by_id

    def list(self) -> tuple[ContractModule, ...]:
        """All modules in catalog definition order."""
        return self._modules

    def ids(self) -> tuple[str, ...]:
        """Module ids in catalog definition order."""
        return tuple(module.id for module in self._modules)

    def get(self, component_id: str) -> ContractModule:
        """Look up a module, raising ComponentNotFoundError when absent."""
        try:
            return self._by_id[component_id]
        except KeyError:
            raise ComponentNotFoundError(
                f"Unknown contract module: {component_id}",
                component_id=component_id,
                context={"available": list(self._by_id)}
            ) from None

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._by_id

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[ContractModule]:
        return iter(self._modules)


def default_registry() -> ComponentRegistry:
    """Registry holding the built-in MultiversX modules."""
    return _DEFAULT_REGISTRY


_DEFAULT_REGISTRY = ComponentRegistry()
