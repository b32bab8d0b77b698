"""Generic phpIPAM request dispatcher.

Every controller embeds a Client. The client turns (method, path, body)
into one HTTP round trip against the session's API application, unwraps
phpIPAM's response envelope and maps failures onto the SDK's exception
hierarchy. It also implements the custom field subsystem, which works the
same way for every controller that supports custom fields.

There is no retry, backoff or pagination at this layer: every call is a
single request, and every failure propagates to the caller.
"""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from ..observability.logger import LogContext
from ..utils.exceptions import (
    AuthenticationError,
    PHPIPAMAPIError,
    ResourceNotFoundError,
)
from .endpoints import PHPIPAMEndpoints
from .response_models import APIResponse, CustomField
from .session import Session

logger = structlog.get_logger(__name__)


class Client:
    """Base client shared by all controllers."""

    def __init__(self, session: Session):
        """
        Initialize the client.

        Args:
            session: Session handle; owned by the caller and only read here.
        """
        self.session = session

    def send_request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> APIResponse:
        """
        Make an authenticated request to the phpIPAM API.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: API path relative to the application (e.g. "/sections/")
            payload: JSON body; omitted from the request when None
            params: Query parameters

        Returns:
            The decoded response envelope

        Raises:
            AuthenticationError: For 401 Unauthorized
            ResourceNotFoundError: For 404 Not Found
            PHPIPAMAPIError: For any other error status, an unsuccessful
                envelope, a malformed body, or a transport failure
        """
        token = self.session.authenticate()
        url = f"{self.session.base_url}{path}"

        logger.debug("Sending request", method=method, path=path, params=params)
        try:
            response = self.session.http.request(
                method, url, params=params, json=payload, headers={"token": token}
            )
        except httpx.HTTPError as e:
            logger.error("HTTP request failed", method=method, path=path, error=str(e))
            raise PHPIPAMAPIError(f"HTTP request failed: {e}") from e

        logger.debug("Received response", method=method, path=path, status=response.status_code)
        return self._parse_response(method, path, response)

    def _parse_response(self, method: str, path: str, response: httpx.Response) -> APIResponse:
        if response.status_code == 204:
            return APIResponse(code=204)

        envelope: APIResponse | None = None
        try:
            envelope = APIResponse.model_validate(response.json())
        except ValueError:
            # Keep raw text for the error message
            pass

        message = envelope.message if envelope and envelope.message else response.text
        status = response.status_code

        if status == 401:
            logger.error("Request unauthorized", method=method, path=path)
            raise AuthenticationError(message)
        if status == 404:
            logger.warning("Resource not found", method=method, path=path)
            raise ResourceNotFoundError(path, message)
        if response.is_error:
            logger.error("API error", method=method, path=path, status=status, message=message)
            raise PHPIPAMAPIError(f"API Error {status}: {message}", status_code=status)
        if envelope is None:
            logger.error("Malformed response", method=method, path=path, status=status)
            raise PHPIPAMAPIError(f"Malformed response from {path}: {message}", status_code=status)
        if not envelope.success:
            code = envelope.code or status
            logger.error("API reported failure", method=method, path=path, code=code)
            raise PHPIPAMAPIError(f"API Error {code}: {message}", status_code=code)

        return envelope

    # -------------------------------------------------------------------------
    # Custom fields
    # -------------------------------------------------------------------------

    def get_custom_fields_schema(self, controller: str) -> dict[str, CustomField]:
        """
        Fetch the custom field schema of a controller.

        Args:
            controller: Controller name (e.g. "subnets", "vlans")

        Returns:
            Mapping of field name to its descriptor; empty when the
            controller has no custom fields.
        """
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.CUSTOM_FIELDS.format(controller=controller)
        )
        if not envelope.data:
            return {}
        if not isinstance(envelope.data, dict):
            raise PHPIPAMAPIError(
                f"Expected a custom field mapping for {controller}, "
                f"got {type(envelope.data).__name__}"
            )
        try:
            return {
                name: CustomField.model_validate(descriptor)
                for name, descriptor in envelope.data.items()
            }
        except ValidationError as e:
            logger.error(
                "Custom field schema validation failed",
                controller=controller,
                validation_errors=e.errors(),
            )
            raise PHPIPAMAPIError(f"Malformed custom field schema for {controller}: {e}") from e

    def get_custom_fields(self, resource_id: int, controller: str) -> dict[str, Any]:
        """
        Fetch the custom field values of one resource.

        The resource is read in full and filtered down to the keys that
        appear in the controller's custom field schema.
        """
        with LogContext(controller=controller, resource_id=resource_id):
            schema = self.get_custom_fields_schema(controller)
            envelope = self.send_request(
                "GET",
                PHPIPAMEndpoints.CONTROLLER_BY_ID.format(
                    controller=controller, resource_id=resource_id
                ),
            )
        fields = envelope.data or {}
        if not isinstance(fields, dict):
            raise PHPIPAMAPIError(f"Expected a JSON object from {controller}/{resource_id}")
        return {key: value for key, value in fields.items() if key in schema}

    def update_custom_fields(
        self, resource_id: int, fields: dict[str, Any], controller: str
    ) -> str:
        """
        PATCH custom field values onto a resource.

        Returns:
            The server's confirmation message
        """
        params = dict(fields)
        params["id"] = resource_id
        with LogContext(controller=controller, resource_id=resource_id):
            envelope = self.send_request(
                "PATCH", PHPIPAMEndpoints.CONTROLLER.format(controller=controller), payload=params
            )
        return envelope.message
