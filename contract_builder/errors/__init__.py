"""
Error classification system for contract composition and deployment.

This module provides the structured exception hierarchy used across the
builder: requests rejected before a deployment session exists, failures of
individual deployment steps, contract generation failures and internal
consistency errors.
"""

from .rejections import (
    RequestRejectedError,
    ValidationError,
    UnknownNetworkError,
    IndexOutOfRangeError,
    BusyError,
    ComponentNotFoundError,
)
from .step_failures import (
    StepFailureError,
    WalletConnectionError,
    CompileError,
    SubmitError,
    VerifyError,
    UnexpectedError,
    SessionResetError,
)
from .authoring_failures import (
    AuthoringError,
    GenerationError,
)
from .system_failures import (
    SystemFailureError,
    StateTransitionError,
    ConfigurationError,
)

__all__ = [
    # Rejections
    "RequestRejectedError",
    "ValidationError",
    "UnknownNetworkError",
    "IndexOutOfRangeError",
    "BusyError",
    "ComponentNotFoundError",
    # Step failures
    "StepFailureError",
    "WalletConnectionError",
    "CompileError",
    "SubmitError",
    "VerifyError",
    "UnexpectedError",
    "SessionResetError",
    # Authoring failures
    "AuthoringError",
    "GenerationError",
    # System failures
    "SystemFailureError",
    "StateTransitionError",
    "ConfigurationError",
]
