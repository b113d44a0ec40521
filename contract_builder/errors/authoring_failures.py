"""
Authoring failure classifications.

These exceptions come from contract generation, which runs outside any
deployment session. The user can edit the prompt or the setup and ask again.
"""

from typing import Optional, Dict, Any


class AuthoringError(Exception):
    """Base class for failures while drafting contract source."""

    code = "authoring_error"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = True


class GenerationError(AuthoringError):
    """Prompt completion service failed to produce contract source."""

    code = "generation_error"

    def __init__(self, message: str, status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status_code = status_code
