"""phpIPAM SDK - typed client for the phpIPAM REST API."""

from .api import Client, Session
from .config import PHPIPAMConfig, SDKConfig
from .controllers import (
    AddressesController,
    L2DomainsController,
    SectionsController,
    SubnetsController,
    VLANsController,
)
from .models import VLAN, Address, L2Domain, Section, Subnet

__version__ = "0.1.0"
__all__ = [
    "Client",
    "Session",
    "PHPIPAMConfig",
    "SDKConfig",
    "SectionsController",
    "SubnetsController",
    "AddressesController",
    "VLANsController",
    "L2DomainsController",
    "Section",
    "Subnet",
    "Address",
    "VLAN",
    "L2Domain",
]
