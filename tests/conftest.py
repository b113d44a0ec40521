"""Pytest configuration and shared fixtures."""

import asyncio
from types import SimpleNamespace
from typing import Optional

import pytest

from contract_builder.config.defaults import DefaultConfig, SimulationParams
from contract_builder.deployment.models import CompiledArtifact, SubmissionReceipt
from contract_builder.deployment.orchestrator import DeploymentOrchestrator
from contract_builder.registry.catalog import ComponentRegistry, ContractModule

DEPLOYER_ADDRESS = "erd1" + "a" * 59
CONTRACT_ADDRESS = "erd1" + "c" * 59
TX_HASH = "f" * 64


class FakeCollaborator:
    """
    Records calls and optionally blocks on a gate or raises.

    Tests create `gate` inside the running loop (asyncio.Event) and set it
    to let the call proceed.
    """

    def __init__(self, returns=None, error: Optional[BaseException] = None):
        self.returns = returns
        self.error = error
        self.gate: Optional[asyncio.Event] = None
        self.calls: list[tuple] = []

    async def _respond(self, *args):
        self.calls.append(args)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.returns


class FakeWallet(FakeCollaborator):
    async def connect(self, network_key):
        return await self._respond(network_key)


class FakeCompiler(FakeCollaborator):
    async def compile(self, source):
        return await self._respond(source)


class FakeSubmitter(FakeCollaborator):
    async def submit(self, artifact, address, network_key):
        return await self._respond(artifact, address, network_key)


class FakeVerifier(FakeCollaborator):
    async def verify(self, contract_address, network_key):
        return await self._respond(contract_address, network_key)


@pytest.fixture
def collaborators():
    """Fake wallet, compiler, submitter and verifier that succeed by default."""
    return SimpleNamespace(
        wallet=FakeWallet(returns=DEPLOYER_ADDRESS),
        compiler=FakeCompiler(returns=CompiledArtifact(wasm=b"\x00asm", source_hash="abc")),
        submitter=FakeSubmitter(returns=SubmissionReceipt(
            contract_address=CONTRACT_ADDRESS,
            tx_hash=TX_HASH,
        )),
        verifier=FakeVerifier(returns=None),
    )


@pytest.fixture
def orchestrator(collaborators) -> DeploymentOrchestrator:
    """Orchestrator wired to the fake collaborators."""
    return DeploymentOrchestrator(
        collaborators.wallet,
        collaborators.compiler,
        collaborators.submitter,
        collaborators.verifier,
    )


@pytest.fixture
def session_log(orchestrator) -> list:
    """Every session value the orchestrator publishes, in order."""
    published = []
    orchestrator.subscribe(published.append)
    return published


@pytest.fixture
def registry() -> ComponentRegistry:
    """Registry with the built-in modules."""
    return ComponentRegistry()


@pytest.fixture
def token_module() -> ContractModule:
    """Small module with comments, blank runs and one trait."""
    return ContractModule(
        id="token",
        name="Token",
        description="Minimal token",
        source_template=(
            "// Token module\n"
            "/* multi\n   line */\n"
            "#[multiversx_sc::module]\n"
            "pub trait TokenModule {\n"
            "\n"
            "\n"
            "    fn supply(&self) -> u64; // total\n"
            "}\n"
        ),
    )


@pytest.fixture
def roles_module() -> ContractModule:
    """Second module with a different trait."""
    return ContractModule(
        id="roles",
        name="Roles",
        description="Role checks",
        source_template="#[multiversx_sc::module]\npub trait RolesModule {\n    fn owner(&self);\n}\n",
    )


@pytest.fixture
def fast_config() -> DefaultConfig:
    """Default configuration with zero simulated latency."""
    return DefaultConfig(simulation=SimulationParams(
        connect_delay=0,
        compile_delay=0,
        submit_delay=0,
        verify_delay=0,
    ))
