"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CompletionError,
    ConfigurationError,
    InfrastructureError,
    MalformedCredentialsError,
    SourceUnavailableError,
)

__all__ = [
    "CompletionError",
    "ConfigurationError",
    "InfrastructureError",
    "MalformedCredentialsError",
    "SourceUnavailableError",
]
