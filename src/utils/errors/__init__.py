"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    InferenceError,
    InfrastructureError,
    MalformedModelOutputError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "InferenceError",
    "InfrastructureError",
    "MalformedModelOutputError",
    "NotFoundError",
    "StoreUnavailableError",
    "ValidationError",
]
