"""Configuration constants for the phpIPAM SDK."""

# -----------------------------------------------------------------------------
# Connection defaults
# -----------------------------------------------------------------------------

# Base API URL when none is configured
DEFAULT_ENDPOINT: str = "http://localhost/api"

# Request timeout in seconds
DEFAULT_TIMEOUT: int = 30


# -----------------------------------------------------------------------------
# Environment variables
# -----------------------------------------------------------------------------

ENV_ENDPOINT: str = "PHPIPAM_ENDPOINT_ADDR"
ENV_APP_ID: str = "PHPIPAM_APP_ID"
ENV_USERNAME: str = "PHPIPAM_USER_NAME"
ENV_PASSWORD: str = "PHPIPAM_PASSWORD"
ENV_INSECURE: str = "PHPIPAM_INSECURE"
ENV_TIMEOUT: str = "PHPIPAM_TIMEOUT"


# -----------------------------------------------------------------------------
# Controller names (custom field subsystem)
# -----------------------------------------------------------------------------

CONTROLLER_SUBNETS: str = "subnets"
CONTROLLER_ADDRESSES: str = "addresses"
CONTROLLER_VLANS: str = "vlans"
