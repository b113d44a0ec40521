"""
Deployment orchestrator.

Drives one deployment session at a time through the fixed step catalog
(connect → compile → deploy → verify), awaiting one collaborator per step.
The session is an immutable value; every change replaces it and is pushed to
subscribers. The first failing step ends the run; nothing is retried.
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..assembler.composer import compose_source
from ..errors import (
    BusyError,
    RequestRejectedError,
    SessionResetError,
    StepFailureError,
    SubmitError,
    UnexpectedError,
    ValidationError,
    WalletConnectionError,
)
from ..logging.config import get_deployment_logger, log_step_transition
from ..networks.profiles import NetworkConfigResolver, NetworkProfile, explorer_account_url
from ..registry.catalog import ContractModule
from ..utils.time import elapsed_seconds, new_session_id, utc_now
from .collaborators import ArtifactCompiler, Submitter, Verifier, WalletSession
from .models import (
    DEPLOYMENT_STEPS,
    CompiledArtifact,
    DeploymentResult,
    DeploymentSession,
    DeploymentStep,
    StepId,
    StepStatus,
    SubmissionReceipt,
)

logger = get_deployment_logger(__name__)

SessionListener = Callable[[DeploymentSession], None]


@dataclass
class _RunContext:
    """Outputs handed from one step to the next within a single run."""
    generation: int
    source: str
    network: NetworkProfile
    address: Optional[str] = None
    artifact: Optional[CompiledArtifact] = None
    receipt: Optional[SubmissionReceipt] = None


class DeploymentOrchestrator:
    """Step-sequenced deployment state machine."""

    def __init__(
        self,
        wallet: WalletSession,
        compiler: ArtifactCompiler,
        submitter: Submitter,
        verifier: Verifier,
        resolver: Optional[NetworkConfigResolver] = None
    ):
        self.wallet = wallet
        self.compiler = compiler
        self.submitter = submitter
        self.verifier = verifier
        self.resolver = resolver or NetworkConfigResolver()
        self.logger = logger

        self._session = DeploymentSession.idle()
        self._generation = 0
        self._listeners: list[SessionListener] = []

    @property
    def session(self) -> DeploymentSession:
        """Current session snapshot."""
        return self._session

    @property
    def steps(self) -> tuple[DeploymentStep, ...]:
        return DEPLOYMENT_STEPS

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener for every new session value.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def reset(self) -> None:
        """
        Return to idle with every step pending, from any state.

        An in-flight run is detached: it stops at its next suspension point
        without touching the new session. Work a collaborator already
        committed is not undone.
        """
        previous = self._session
        self._generation += 1
        self._publish(DeploymentSession.idle())

        self.logger.info(
            "Deployment session reset",
            session_id=previous.session_id,
            previous_status=previous.overall_status.value,
            detached_run=previous.is_processing
        )

    async def deploy_modules(
        self,
        modules: Sequence[ContractModule],
        network_key: str
    ) -> DeploymentResult:
        """Compose a module selection and deploy the generated source."""
        if not modules:
            error = ValidationError("Please add at least one component to deploy", field="modules")
            self.logger.warning("Deployment rejected", error=error.code, reason=str(error))
            return DeploymentResult.failure(error)
        return await self.deploy(compose_source(modules), network_key)

    async def deploy(self, source: str, network_key: str) -> DeploymentResult:
        """
        Run a fresh deployment session.

        Args:
            source: Contract source to compile and publish
            network_key: One of the supported network keys

        Returns:
            DeploymentResult; failures are reported through it, never raised
        """
        try:
            network = self._admit(source, network_key)
        except RequestRejectedError as e:
            self.logger.warning(
                "Deployment rejected",
                error=e.code,
                reason=str(e),
                network=network_key
            )
            return DeploymentResult.failure(e)

        self._generation += 1
        ctx = _RunContext(generation=self._generation, source=source, network=network)
        self._commit(
            DeploymentSession.start(new_session_id(), network, utc_now()),
            [DEPLOYMENT_STEPS[0].id]
        )

        self.logger.info(
            "Deployment started",
            session_id=self._session.session_id,
            network=network.key,
            chain_id=network.chain_id,
            source_length=len(source)
        )

        try:
            return await self._run(ctx)
        except asyncio.CancelledError:
            if self._is_live(ctx):
                self.logger.warning(
                    "Deployment abandoned by caller",
                    session_id=self._session.session_id,
                    step_id=self._session.current_step_id.value if self._session.current_step_id else None
                )
                self.reset()
            raise

    def _admit(self, source: str, network_key: str) -> NetworkProfile:
        """Checks that run before any session is created."""
        if not isinstance(source, str) or not source.strip():
            raise ValidationError("No contract code provided", field="source")

        network = self.resolver.resolve(network_key)

        if self._session.is_processing:
            current = self._session.current_step_id
            raise BusyError(
                "A deployment is already in progress",
                current_step=current.value if current else None,
                context={"session_id": self._session.session_id}
            )

        return network

    async def _run(self, ctx: _RunContext) -> DeploymentResult:
        handlers = {
            StepId.CONNECT: self._connect,
            StepId.COMPILE: self._compile,
            StepId.DEPLOY: self._submit,
            StepId.VERIFY: self._verify,
        }

        for index, step in enumerate(DEPLOYMENT_STEPS):
            try:
                await handlers[step.id](ctx)
            except Exception as e:
                if not self._is_live(ctx):
                    return self._detached(ctx, step.id)
                return self._fail(step.id, self._classify(e, step.id))

            if not self._is_live(ctx):
                return self._detached(ctx, step.id)

            if index + 1 < len(DEPLOYMENT_STEPS):
                # Completion and hand-off are one published value
                following = DEPLOYMENT_STEPS[index + 1].id
                self._commit(
                    self._session
                    .with_step_status(step.id, StepStatus.COMPLETED)
                    .with_step_status(following, StepStatus.CURRENT),
                    [step.id, following]
                )

        return self._succeed(ctx, DEPLOYMENT_STEPS[-1].id)

    async def _connect(self, ctx: _RunContext) -> None:
        address = await self.wallet.connect(ctx.network.key)
        if not address:
            raise WalletConnectionError("Failed to get wallet address", network_key=ctx.network.key)
        ctx.address = address

    async def _compile(self, ctx: _RunContext) -> None:
        ctx.artifact = await self.compiler.compile(ctx.source)

    async def _submit(self, ctx: _RunContext) -> None:
        receipt = await self.submitter.submit(ctx.artifact, ctx.address, ctx.network.key)
        if receipt is None or not receipt.contract_address or not receipt.tx_hash:
            raise SubmitError("Submitter returned no contract address or transaction hash")
        ctx.receipt = receipt

    async def _verify(self, ctx: _RunContext) -> None:
        await self.verifier.verify(ctx.receipt.contract_address, ctx.network.key)

    def _classify(self, exc: Exception, step_id: StepId) -> StepFailureError:
        """Keep structured step failures; wrap everything else."""
        if isinstance(exc, StepFailureError) and not isinstance(exc, SessionResetError):
            # The step that was running owns the failure, whatever the raiser assumed
            exc.step_id = step_id.value
            return exc
        return UnexpectedError(
            f"Unexpected error during {step_id.value}: {exc}",
            original=exc,
            step_id=step_id.value
        )

    def _fail(self, step_id: StepId, error: StepFailureError) -> DeploymentResult:
        self._commit(
            self._session
            .with_step_status(step_id, StepStatus.ERROR)
            .with_error(str(error), utc_now()),
            [step_id],
            context={"error": error.code}
        )

        self.logger.error(
            "Deployment failed",
            session_id=self._session.session_id,
            step_id=step_id.value,
            error=error.code,
            reason=str(error),
            duration_seconds=elapsed_seconds(self._session.started_at, self._session.finished_at)
        )
        return DeploymentResult.failure(error)

    def _succeed(self, ctx: _RunContext, last_step_id: StepId) -> DeploymentResult:
        receipt = ctx.receipt
        result = DeploymentResult(
            success=True,
            address=receipt.contract_address,
            explorer_url=explorer_account_url(ctx.network, receipt.contract_address),
            tx_hash=receipt.tx_hash,
            message=f"Contract deployed successfully to {ctx.network.display_name}!",
        )
        self._commit(
            self._session
            .with_step_status(last_step_id, StepStatus.COMPLETED)
            .with_success(result, utc_now()),
            [last_step_id]
        )

        self.logger.info(
            "Deployment succeeded",
            session_id=self._session.session_id,
            network=ctx.network.key,
            address=result.address,
            tx_hash=result.tx_hash,
            duration_seconds=elapsed_seconds(self._session.started_at, self._session.finished_at)
        )
        return result

    def _detached(self, ctx: _RunContext, step_id: StepId) -> DeploymentResult:
        self.logger.info(
            "Detached run stopped after reset",
            step_id=step_id.value,
            network=ctx.network.key
        )
        return DeploymentResult.failure(SessionResetError(
            "Deployment session was reset while in progress",
            step_id=step_id.value
        ))

    def _is_live(self, ctx: _RunContext) -> bool:
        return ctx.generation == self._generation

    def _commit(self, session: DeploymentSession, changed: Sequence[StepId],
                context: Optional[dict] = None) -> None:
        """Publish one session value and log each step change it carries."""
        # A new session starts from every step pending, not from the last run
        before = self._session
        if before.session_id != session.session_id:
            before = DeploymentSession.idle()

        self._publish(session)

        for step_id in changed:
            log_step_transition(
                self.logger,
                session_id=session.session_id,
                step_id=step_id.value,
                from_status=before.status_of(step_id).value,
                to_status=session.status_of(step_id).value,
                network=session.network.key if session.network else None,
                context=context
            )

    def _publish(self, session: DeploymentSession) -> None:
        self._session = session
        for listener in list(self._listeners):
            try:
                listener(session)
            except Exception as e:
                self.logger.error(
                    "Session listener failed",
                    listener=getattr(listener, "__name__", repr(listener)),
                    error=str(e)
                )
