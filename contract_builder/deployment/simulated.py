"""
Simulated deployment collaborators.

Stand-ins for a real wallet, compiler and network used by the CLI and in
demos. They sleep for a configurable latency and fabricate plausible
results: bech32-looking erd1 addresses, 64-hex transaction hashes and a
wasm artifact holding only the module magic. Any of them can be told to fail.
"""

import asyncio
import hashlib
import secrets
from typing import Optional

from ..config.defaults import SimulationParams
from ..errors import CompileError, SubmitError, VerifyError, WalletConnectionError
from ..logging.config import get_logger
from .models import CompiledArtifact, SubmissionReceipt

logger = get_logger(__name__)

WASM_MAGIC = b"\x00asm"


def random_address() -> str:
    """erd1 prefix followed by 59 random hex characters."""
    return "erd1" + "".join(secrets.choice("0123456789abcdef") for _ in range(59))


def random_tx_hash() -> str:
    return secrets.token_hex(32)


class SimulatedWallet:
    """Wallet that hands out a random deployer address."""

    def __init__(self, delay: float = 1.5, fail_with: Optional[str] = None):
        self.delay = delay
        self.fail_with = fail_with
        self.address: Optional[str] = None

    async def connect(self, network_key: str) -> str:
        logger.info("Connecting to MultiversX wallet", network=network_key)
        await asyncio.sleep(self.delay)

        if self.fail_with:
            raise WalletConnectionError(
                f"Failed to connect to MultiversX wallet: {self.fail_with}",
                network_key=network_key
            )

        self.address = random_address()
        return self.address


class SimulatedCompiler:
    """Compiler that accepts any source and returns the wasm magic bytes."""

    def __init__(self, delay: float = 2.0, fail_with: Optional[str] = None):
        self.delay = delay
        self.fail_with = fail_with

    async def compile(self, source: str) -> CompiledArtifact:
        logger.info("Compiling Rust code to WASM", source_length=len(source))
        await asyncio.sleep(self.delay)

        if self.fail_with:
            raise CompileError(
                f"Failed to compile Rust code to WASM: {self.fail_with}",
                stderr=self.fail_with
            )

        return CompiledArtifact(
            wasm=WASM_MAGIC,
            source_hash=hashlib.sha256(source.encode("utf-8")).hexdigest(),
            metadata={"simulated": True},
        )


class SimulatedSubmitter:
    """Submitter that fabricates a contract address and transaction hash."""

    def __init__(self, delay: float = 9.0, fail_with: Optional[str] = None):
        self.delay = delay
        self.fail_with = fail_with

    async def submit(self, artifact: CompiledArtifact, address: str,
                     network_key: str) -> SubmissionReceipt:
        logger.info(
            "Sending deployment transaction",
            network=network_key,
            deployer=address,
            artifact_size=artifact.size
        )
        await asyncio.sleep(self.delay)

        if self.fail_with:
            raise SubmitError(f"Deployment transaction failed: {self.fail_with}")

        return SubmissionReceipt(contract_address=random_address(), tx_hash=random_tx_hash())


class SimulatedVerifier:
    """Verifier that accepts every erd1 address."""

    def __init__(self, delay: float = 0.5, fail_with: Optional[str] = None):
        self.delay = delay
        self.fail_with = fail_with

    async def verify(self, contract_address: str, network_key: str) -> None:
        logger.info("Verifying contract", network=network_key, address=contract_address)
        await asyncio.sleep(self.delay)

        if self.fail_with or not contract_address.startswith("erd1"):
            raise VerifyError(
                f"Contract verification failed: {self.fail_with or 'not an erd1 address'}",
                contract_address=contract_address
            )


def simulated_collaborators(
    params: Optional[SimulationParams] = None
) -> tuple[SimulatedWallet, SimulatedCompiler, SimulatedSubmitter, SimulatedVerifier]:
    """Wallet, compiler, submitter and verifier with latencies from config."""
    params = params or SimulationParams()
    return (
        SimulatedWallet(delay=params.connect_delay),
        SimulatedCompiler(delay=params.compile_delay),
        SimulatedSubmitter(delay=params.submit_delay),
        SimulatedVerifier(delay=params.verify_delay),
    )
