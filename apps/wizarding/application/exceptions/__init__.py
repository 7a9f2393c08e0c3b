"""Application Exceptions."""

from wizarding.application.exceptions.errors import (
    ApplicationError,
    LoadFailureError,
    UnknownResourceTypeError,
    UpstreamUnavailableError,
)

__all__ = [
    "ApplicationError",
    "LoadFailureError",
    "UnknownResourceTypeError",
    "UpstreamUnavailableError",
]
