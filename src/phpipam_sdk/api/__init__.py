"""phpIPAM REST API transport: session, dispatcher and response models."""

from .client import Client
from .endpoints import PHPIPAMEndpoints
from .response_models import APIResponse, CustomField
from .session import Session

__all__ = ["Client", "Session", "PHPIPAMEndpoints", "APIResponse", "CustomField"]
