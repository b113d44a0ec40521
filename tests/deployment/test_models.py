"""Tests for deployment session data models."""

from datetime import datetime, timedelta, timezone

import pytest

from contract_builder.deployment.models import (
    DEPLOYMENT_STEPS,
    CompiledArtifact,
    DeploymentResult,
    DeploymentSession,
    OverallStatus,
    StepId,
    StepStatus,
)
from contract_builder.errors import CompileError, StateTransitionError
from contract_builder.networks.profiles import NETWORK_PROFILES

STARTED = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def processing_session() -> DeploymentSession:
    return DeploymentSession.start("abc123", NETWORK_PROFILES["testnet"], STARTED)


class TestStepCatalog:
    """Test the fixed step catalog."""

    def test_catalog_order(self):
        """Test steps are listed in execution order."""
        assert [step.id for step in DEPLOYMENT_STEPS] == [
            StepId.CONNECT, StepId.COMPILE, StepId.DEPLOY, StepId.VERIFY
        ]

    def test_catalog_titles(self):
        """Test step titles and descriptions are populated."""
        titles = [step.title for step in DEPLOYMENT_STEPS]
        assert titles == ["Connect Wallet", "Compile Contract", "Deploy Contract", "Verify Contract"]
        assert all(step.description for step in DEPLOYMENT_STEPS)


class TestDeploymentSession:
    """Test immutable session transitions."""

    def test_idle_session(self):
        """Test the idle session has every step pending."""
        session = DeploymentSession.idle()

        assert session.overall_status == OverallStatus.IDLE
        assert set(session.step_statuses.values()) == {StepStatus.PENDING}
        assert session.current_step_id is None
        assert not session.is_processing

    def test_start(self, processing_session):
        """Test a started session is processing with the first step current."""
        assert processing_session.is_processing
        assert processing_session.current_step_id == StepId.CONNECT
        assert processing_session.status_of(StepId.CONNECT) == StepStatus.CURRENT
        assert {processing_session.status_of(s) for s in ("compile", "deploy", "verify")} == {
            StepStatus.PENDING
        }
        assert processing_session.session_id == "abc123"
        assert processing_session.network.chain_id == "T"
        assert processing_session.started_at == STARTED

    def test_step_transition_returns_new_session(self, processing_session):
        """Test with_step_status leaves the original untouched."""
        updated = processing_session.with_step_status(StepId.CONNECT, StepStatus.COMPLETED)

        assert updated.status_of(StepId.CONNECT) == StepStatus.COMPLETED
        assert processing_session.status_of(StepId.CONNECT) == StepStatus.CURRENT
        assert processing_session.current_step_id == StepId.CONNECT

    def test_completed_clears_current_step(self, processing_session):
        """Test completing a step leaves no step current."""
        session = processing_session.with_step_status(StepId.CONNECT, StepStatus.COMPLETED)

        assert session.current_step_id is None
        assert session.status_of("connect") == StepStatus.COMPLETED

    def test_hand_off_makes_next_step_current(self, processing_session):
        """Test chaining completion and the next current step yields one current step."""
        session = (processing_session
                   .with_step_status(StepId.CONNECT, StepStatus.COMPLETED)
                   .with_step_status(StepId.COMPILE, StepStatus.CURRENT))

        assert session.current_step_id == StepId.COMPILE
        assert list(session.step_statuses.values()).count(StepStatus.CURRENT) == 1

    @pytest.mark.parametrize("old, new", [
        (StepStatus.PENDING, StepStatus.COMPLETED),
        (StepStatus.PENDING, StepStatus.ERROR),
        (StepStatus.COMPLETED, StepStatus.CURRENT),
        (StepStatus.ERROR, StepStatus.PENDING),
    ])
    def test_illegal_transitions(self, processing_session, old, new):
        """Test anything but pending -> current -> completed|error is refused."""
        session = processing_session
        if old != StepStatus.PENDING:
            session = session.with_step_status(StepId.COMPILE, StepStatus.CURRENT)
            session = session.with_step_status(StepId.COMPILE, old)

        with pytest.raises(StateTransitionError) as exc_info:
            session.with_step_status(StepId.COMPILE, new)

        assert exc_info.value.current_state == old.value
        assert exc_info.value.attempted_transition == new.value

    def test_session_is_frozen(self, processing_session):
        """Test session fields cannot be reassigned."""
        with pytest.raises(AttributeError):
            processing_session.overall_status = OverallStatus.SUCCESS

        with pytest.raises(TypeError):
            processing_session.step_statuses[StepId.CONNECT] = StepStatus.CURRENT

    def test_with_error(self, processing_session):
        """Test an error session records the message and finish time."""
        finished = STARTED + timedelta(seconds=3)
        session = processing_session.with_error("boom", finished)

        assert session.overall_status == OverallStatus.ERROR
        assert session.error_message == "boom"
        assert session.result is None
        assert session.finished_at == finished

    def test_to_dict(self, processing_session):
        """Test JSON-ready representation."""
        result = DeploymentResult(success=True, address="erd1x", explorer_url="u", tx_hash="t")
        session = processing_session.with_success(result, STARTED + timedelta(seconds=10))

        data = session.to_dict()

        assert data["overall_status"] == "success"
        assert data["network"] == "testnet"
        assert data["step_statuses"] == {
            "connect": "current", "compile": "pending", "deploy": "pending", "verify": "pending"
        }
        assert data["started_at"] == "2024-05-01T12:00:00Z"
        assert data["finished_at"] == "2024-05-01T12:00:10Z"
        assert data["result"]["address"] == "erd1x"


class TestDeploymentResult:
    """Test deployment result helpers."""

    def test_failure_from_error(self):
        """Test failure results carry the classifying exception."""
        error = CompileError("Compilation failed")
        result = DeploymentResult.failure(error)

        assert result.success is False
        assert result.error is error
        assert result.error_code == "compile_error"
        assert result.message == "Compilation failed"
        assert result.to_dict() == {
            "success": False,
            "error": "compile_error",
            "message": "Compilation failed",
        }

    def test_success_has_no_error_code(self):
        """Test successful results report no error code."""
        result = DeploymentResult(success=True, address="erd1x", explorer_url="u", tx_hash="t")

        assert result.error_code is None
        assert result.to_dict() == {
            "success": True, "address": "erd1x", "explorer_url": "u", "tx_hash": "t"
        }

    def test_artifact_size(self):
        """Test artifact size is the wasm length."""
        assert CompiledArtifact(wasm=b"\x00asm\x01\x00").size == 6
