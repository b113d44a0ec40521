"""
Collaborator contracts consumed by the deployment orchestrator.

Each step of a deployment awaits exactly one of these. Implementations raise
the matching StepFailureError subclass on failure; anything else they raise
is reported as an UnexpectedError.
"""

from typing import Protocol, runtime_checkable

from .models import CompiledArtifact, SubmissionReceipt


@runtime_checkable
class WalletSession(Protocol):
    """Wallet that signs on behalf of the deployer."""

    async def connect(self, network_key: str) -> str:
        """Connect and return the deployer address; raise WalletConnectionError."""
        ...


@runtime_checkable
class ArtifactCompiler(Protocol):
    """Turns contract source into a deployable artifact."""

    async def compile(self, source: str) -> CompiledArtifact:
        """Compile source; raise CompileError."""
        ...


@runtime_checkable
class Submitter(Protocol):
    """Sends the deployment transaction."""

    async def submit(self, artifact: CompiledArtifact, address: str,
                     network_key: str) -> SubmissionReceipt:
        """Deploy artifact from address; raise SubmitError."""
        ...


@runtime_checkable
class Verifier(Protocol):
    """Confirms the deployed contract on the network."""

    async def verify(self, contract_address: str, network_key: str) -> None:
        """Verify the contract; raise VerifyError."""
        ...
