"""Utility functions and exceptions."""

from .exceptions import (
    AuthenticationError,
    MalformedScalarError,
    PHPIPAMAPIError,
    PHPIPAMError,
    ResourceNotFoundError,
    UnknownCustomFieldError,
    ValidationError,
)

__all__ = [
    "PHPIPAMError",
    "ValidationError",
    "MalformedScalarError",
    "UnknownCustomFieldError",
    "PHPIPAMAPIError",
    "AuthenticationError",
    "ResourceNotFoundError",
]
