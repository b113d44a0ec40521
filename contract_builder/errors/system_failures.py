"""
System failure error classifications.

These exceptions represent internal inconsistencies or a broken setup that
require a code or configuration fix rather than a new attempt.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class StateTransitionError(SystemFailureError):
    """Illegal step status transition inside a deployment session."""

    def __init__(self, message: str, current_state: Optional[str] = None,
                 attempted_transition: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_state = current_state
        self.attempted_transition = attempted_transition


class ConfigurationError(SystemFailureError):
    """Configuration file is unreadable or fails validation."""

    def __init__(self, message: str, source: Optional[str] = None,
                 issues: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source = source
        self.issues = issues or []
