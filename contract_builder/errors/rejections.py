"""
Rejection error classifications.

These exceptions describe requests that are refused up front, before any
deployment session is created or any collaborator is contacted.
"""

from typing import Optional, Dict, Any


class RequestRejectedError(Exception):
    """Base class for requests refused before any work starts."""

    code = "rejected"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = True


class ValidationError(RequestRejectedError):
    """Empty source or empty selection."""

    code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class UnknownNetworkError(RequestRejectedError):
    """Network key is not one of the supported keys."""

    code = "unknown_network"

    def __init__(self, message: str, network_key: Optional[str] = None,
                 supported: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.network_key = network_key
        self.supported = supported or []


class IndexOutOfRangeError(RequestRejectedError):
    """Selection index outside [0, length)."""

    code = "index_out_of_range"

    def __init__(self, message: str, index: Optional[int] = None,
                 length: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.length = length


class BusyError(RequestRejectedError):
    """A deployment is already processing on this orchestrator."""

    code = "busy"

    def __init__(self, message: str, current_step: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.current_step = current_step


class ComponentNotFoundError(RequestRejectedError):
    """Requested module id is absent from the registry."""

    code = "not_found"

    def __init__(self, message: str, component_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.component_id = component_id
