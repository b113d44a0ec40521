"""
Deployment step failure classifications.

Each exception maps onto one failing step of a deployment session. None of
them is retried automatically; the caller starts a fresh deployment instead.
"""

from typing import Optional, Dict, Any


class StepFailureError(Exception):
    """Base class for failures raised while a deployment step runs."""

    code = "step_failure"

    def __init__(self, message: str, step_id: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.step_id = step_id
        self.context = context or {}
        self.recoverable = False


class WalletConnectionError(StepFailureError):
    """Wallet could not be connected or returned no address."""

    code = "connection_error"

    def __init__(self, message: str, network_key: Optional[str] = None, **kwargs):
        kwargs.setdefault("step_id", "connect")
        super().__init__(message, **kwargs)
        self.network_key = network_key


class CompileError(StepFailureError):
    """Contract source failed to compile."""

    code = "compile_error"

    def __init__(self, message: str, stderr: Optional[str] = None, **kwargs):
        kwargs.setdefault("step_id", "compile")
        super().__init__(message, **kwargs)
        self.stderr = stderr


class SubmitError(StepFailureError):
    """Deployment transaction was rejected or never confirmed."""

    code = "submit_error"

    def __init__(self, message: str, tx_hash: Optional[str] = None, **kwargs):
        kwargs.setdefault("step_id", "deploy")
        super().__init__(message, **kwargs)
        self.tx_hash = tx_hash


class VerifyError(StepFailureError):
    """Deployed contract could not be verified."""

    code = "verify_error"

    def __init__(self, message: str, contract_address: Optional[str] = None, **kwargs):
        kwargs.setdefault("step_id", "verify")
        super().__init__(message, **kwargs)
        self.contract_address = contract_address


class UnexpectedError(StepFailureError):
    """Collaborator raised an unstructured exception."""

    code = "unexpected_error"

    def __init__(self, message: str, original: Optional[BaseException] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.original = original


class SessionResetError(StepFailureError):
    """Run was detached by a reset while a step was in flight."""

    code = "session_reset"
