"""Custom exceptions for the phpIPAM SDK.

Exception Hierarchy:
-------------------
PHPIPAMError (base)
├── ValidationError
│   ├── MalformedScalarError     # Int/bool field held an unparseable token
│   └── UnknownCustomFieldError  # Custom field not present in the schema
└── PHPIPAMAPIError (base for API errors)
    ├── AuthenticationError      # HTTP 401 or token request failed
    └── ResourceNotFoundError    # HTTP 404

Usage Guidelines:
----------------
1. Catch PHPIPAMAPIError for anything the server or transport rejected.
2. MalformedScalarError means the response itself was unusable; the
   containing operation is aborted.
3. UnknownCustomFieldError is raised before any mutating request is sent.
4. Nothing here is retried by the SDK.
"""

from typing import Any


class PHPIPAMError(Exception):
    """Base exception for all SDK errors."""

    pass


class ValidationError(PHPIPAMError):
    """Raised when client-side validation fails."""

    pass


class MalformedScalarError(ValidationError):
    """Raised when a normalized integer or boolean cannot be decoded."""

    def __init__(self, kind: str, value: Any) -> None:
        """
        Initialize MalformedScalarError.

        Args:
            kind: Target scalar kind ("integer" or "boolean").
            value: The raw JSON token that failed to decode.
        """
        super().__init__(f"Cannot decode {value!r} as {kind}")
        self.kind = kind
        self.value = value


class UnknownCustomFieldError(ValidationError):
    """Raised when a custom field update names a field missing from the schema."""

    def __init__(self, field_name: str, controller: str) -> None:
        """
        Initialize UnknownCustomFieldError.

        Args:
            field_name: The offending custom field name.
            controller: Controller whose schema was checked (e.g. "vlans").
        """
        super().__init__(
            f"Custom field {field_name} not found in schema for controller {controller}"
        )
        self.field_name = field_name
        self.controller = controller


class PHPIPAMAPIError(PHPIPAMError):
    """Base exception for phpIPAM API errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Initialize PHPIPAMAPIError.

        Args:
            message: Error message.
            status_code: Optional HTTP status code.
        """
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(PHPIPAMAPIError):
    """Raised when phpIPAM authentication fails."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, status_code=401)


class ResourceNotFoundError(PHPIPAMAPIError):
    """Raised when a phpIPAM resource cannot be found."""

    def __init__(self, path: str, message: str) -> None:
        """
        Initialize ResourceNotFoundError.

        Args:
            path: Request path that returned 404.
            message: Server message.
        """
        super().__init__(f"Resource not found ({path}): {message}", status_code=404)
        self.path = path
