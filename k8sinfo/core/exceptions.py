"""
Error types raised by the services.
All of them end up as HTTP 500 with the message in the response body.
"""

from typing import Optional


class K8sInfoError(Exception):
    """Base class for errors surfaced to API callers."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self):
        return self.message


class ConfigError(K8sInfoError):
    """No usable cluster credentials could be resolved."""


class APIError(K8sInfoError):
    """A call against the cluster API failed."""


class MetricsError(K8sInfoError):
    """Sampling a local OS metric failed."""
