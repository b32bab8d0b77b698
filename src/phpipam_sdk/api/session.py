"""phpIPAM session handling.

A Session owns the connection settings, the HTTP connection and the API
token. It is created once by the caller and shared by every controller;
controllers only read from it.

Authentication:
--------------
phpIPAM uses token authentication per API application:
1. POST {endpoint}/{app_id}/user/ with HTTP basic auth
2. Receive data.token (and data.expires)
3. Send the token in the ``token`` header of subsequent requests
"""

import httpx
import structlog
from pydantic import ValidationError

from ..config import PHPIPAMConfig
from ..utils.exceptions import AuthenticationError
from .endpoints import PHPIPAMEndpoints
from .response_models import APIResponse, TokenData

logger = structlog.get_logger(__name__)


class Session:
    """
    Authenticated handle to one phpIPAM API application.

    The token is requested lazily on first use and then reused for the
    lifetime of the session. No refresh is attempted on expiry.
    """

    def __init__(self, config: PHPIPAMConfig):
        """
        Initialize a session.

        Args:
            config: phpIPAM connection configuration
        """
        self.config = config
        self.base_url = f"{config.endpoint.rstrip('/')}/{config.app_id}"

        self.token: str | None = None
        self.token_expires: str | None = None

        self._client: httpx.Client | None = None  # Lazy-loaded

    def __enter__(self) -> "Session":
        self.authenticate()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    @property
    def http(self) -> httpx.Client:
        """Get the HTTP client, creating it on first use."""
        if self._client is None:
            self._client = httpx.Client(
                verify=self.config.verify_ssl,
                timeout=self.config.timeout,
            )
        return self._client

    def authenticate(self, force: bool = False) -> str:
        """
        Request an API token from phpIPAM.

        Args:
            force: Request a new token even if one is already held.

        Returns:
            The API token.

        Raises:
            AuthenticationError: If the credentials are rejected or the
                server cannot be reached.
        """
        if self.token and not force:
            return self.token

        logger.info("Authenticating with phpIPAM", url=self.base_url, app_id=self.config.app_id)
        try:
            response = self.http.post(
                f"{self.base_url}{PHPIPAMEndpoints.USER}",
                auth=(self.config.username, self.config.password),
            )
        except httpx.HTTPError as e:
            logger.error("Authentication connection error", error=str(e))
            raise AuthenticationError(f"Connection error during authentication: {e}") from e

        if response.status_code not in (200, 201):
            logger.error("Authentication failed", status=response.status_code)
            raise AuthenticationError(f"Authentication failed: {response.text}")

        try:
            envelope = APIResponse.model_validate(response.json())
            token_data = TokenData.model_validate(envelope.data)
        except ValueError as e:
            # pydantic's ValidationError and JSONDecodeError are both ValueErrors
            detail = e.errors() if isinstance(e, ValidationError) else str(e)
            logger.error("Malformed authentication response", error=detail)
            raise AuthenticationError(f"Malformed authentication response: {e}") from e

        self.token = token_data.token
        self.token_expires = token_data.expires
        logger.info("Authentication successful", expires=self.token_expires)
        return self.token
