"""
Deployment session data models.

This module defines the fixed step catalog, the step and overall status
enums, and the immutable session value the orchestrator publishes after
every change.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..errors import StateTransitionError
from ..networks.profiles import NetworkProfile
from ..utils.time import format_timestamp


class StepId(str, Enum):
    """Deployment stages in execution order."""
    CONNECT = "connect"
    COMPILE = "compile"
    DEPLOY = "deploy"
    VERIFY = "verify"


class StepStatus(str, Enum):
    """Status of a single deployment step."""
    PENDING = "pending"
    CURRENT = "current"
    COMPLETED = "completed"
    ERROR = "error"


class OverallStatus(str, Enum):
    """Status of a deployment session as a whole."""
    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class DeploymentStep:
    """One entry of the fixed step catalog."""
    id: StepId
    title: str
    description: str


# Order is load-bearing: each step consumes the previous step's output
DEPLOYMENT_STEPS: tuple[DeploymentStep, ...] = (
    DeploymentStep(
        id=StepId.CONNECT,
        title="Connect Wallet",
        description="Connect to MultiversX Web Wallet or xPortal App",
    ),
    DeploymentStep(
        id=StepId.COMPILE,
        title="Compile Contract",
        description="Optimize and compile Rust code to WASM",
    ),
    DeploymentStep(
        id=StepId.DEPLOY,
        title="Deploy Contract",
        description="Send transaction to the MultiversX network",
    ),
    DeploymentStep(
        id=StepId.VERIFY,
        title="Verify Contract",
        description="Verify contract source code on the network",
    ),
)

# Legal step status transitions
STEP_TRANSITIONS: Mapping[StepStatus, frozenset] = MappingProxyType({
    StepStatus.PENDING: frozenset({StepStatus.CURRENT}),
    StepStatus.CURRENT: frozenset({StepStatus.COMPLETED, StepStatus.ERROR}),
    StepStatus.COMPLETED: frozenset(),
    StepStatus.ERROR: frozenset(),
})


def pending_statuses() -> Mapping[StepId, StepStatus]:
    """Every catalog step set to pending."""
    return MappingProxyType({step.id: StepStatus.PENDING for step in DEPLOYMENT_STEPS})


@dataclass(frozen=True)
class CompiledArtifact:
    """Output of the compile step."""
    wasm: bytes
    source_hash: Optional[str] = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.wasm)


@dataclass(frozen=True)
class SubmissionReceipt:
    """Output of the deploy step."""
    contract_address: str
    tx_hash: str


@dataclass(frozen=True)
class DeploymentResult:
    """Outcome of one deploy() call, success or failure."""
    success: bool
    address: Optional[str] = None
    explorer_url: Optional[str] = None
    tx_hash: Optional[str] = None
    message: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def error_code(self) -> Optional[str]:
        """Machine-readable code of the classifying exception."""
        if self.error is None:
            return None
        return getattr(self.error, "code", type(self.error).__name__)

    @classmethod
    def failure(cls, error: Exception) -> "DeploymentResult":
        return cls(success=False, message=str(error), error=error)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        data: dict[str, Any] = {"success": self.success}
        if self.success:
            data.update(address=self.address, explorer_url=self.explorer_url, tx_hash=self.tx_hash)
        else:
            data.update(error=self.error_code, message=self.message)
        return data


@dataclass(frozen=True)
class DeploymentSession:
    """Immutable snapshot of a deployment attempt."""

    session_id: Optional[str] = None
    network: Optional[NetworkProfile] = None
    overall_status: OverallStatus = OverallStatus.IDLE
    step_statuses: Mapping[StepId, StepStatus] = field(default_factory=pending_statuses)
    current_step_id: Optional[StepId] = None
    error_message: Optional[str] = None
    result: Optional[DeploymentResult] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @classmethod
    def idle(cls) -> "DeploymentSession":
        return cls()

    @classmethod
    def start(cls, session_id: str, network: NetworkProfile,
              timestamp: datetime) -> "DeploymentSession":
        """New processing session with the first step already current."""
        first = DEPLOYMENT_STEPS[0].id
        statuses = dict(pending_statuses())
        statuses[first] = StepStatus.CURRENT

        return cls(
            session_id=session_id,
            network=network,
            overall_status=OverallStatus.PROCESSING,
            step_statuses=MappingProxyType(statuses),
            current_step_id=first,
            started_at=timestamp,
        )

    @property
    def is_processing(self) -> bool:
        return self.overall_status == OverallStatus.PROCESSING

    def status_of(self, step_id: StepId) -> StepStatus:
        return self.step_statuses[StepId(step_id)]

    def with_step_status(self, step_id: StepId, new_status: StepStatus) -> "DeploymentSession":
        """Move one step forward, rejecting anything but pending→current→(completed|error)."""
        step_id = StepId(step_id)
        old_status = self.step_statuses[step_id]

        if new_status not in STEP_TRANSITIONS[old_status]:
            raise StateTransitionError(
                f"Invalid step transition for {step_id.value}: "
                f"{old_status.value} -> {new_status.value}",
                current_state=old_status.value,
                attempted_transition=new_status.value
            )

        statuses = dict(self.step_statuses)
        statuses[step_id] = new_status

        return replace(
            self,
            step_statuses=MappingProxyType(statuses),
            current_step_id=step_id if new_status == StepStatus.CURRENT else None,
        )

    def with_error(self, message: str, timestamp: datetime) -> "DeploymentSession":
        """Terminal failure; later steps stay pending."""
        return replace(
            self,
            overall_status=OverallStatus.ERROR,
            current_step_id=None,
            error_message=message,
            result=None,
            finished_at=timestamp,
        )

    def with_success(self, result: DeploymentResult, timestamp: datetime) -> "DeploymentSession":
        return replace(
            self,
            overall_status=OverallStatus.SUCCESS,
            current_step_id=None,
            error_message=None,
            result=result,
            finished_at=timestamp,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "session_id": self.session_id,
            "network": self.network.key if self.network else None,
            "overall_status": self.overall_status.value,
            "step_statuses": {step.value: status.value for step, status in self.step_statuses.items()},
            "current_step_id": self.current_step_id.value if self.current_step_id else None,
            "error_message": self.error_message,
            "result": self.result.to_dict() if self.result else None,
            "started_at": format_timestamp(self.started_at),
            "finished_at": format_timestamp(self.finished_at),
        }
