"""Client response models for the termweb API client.

This module re-exports the wire models from the API layer so client code
does not have to import from ``api`` directly.
"""

from api.models import (
    CommandRequest,
    CommandResponse,
    ErrorResponse,
    HealthResponse,
    SessionResponse,
)

__all__ = [
    "CommandRequest",
    "CommandResponse",
    "ErrorResponse",
    "HealthResponse",
    "SessionResponse",
]
