"""One controller per phpIPAM resource family."""

from .addresses import AddressesController
from .l2domains import L2DomainsController
from .sections import SectionsController
from .subnets import SubnetsController
from .vlans import VLANsController

__all__ = [
    "SectionsController",
    "SubnetsController",
    "AddressesController",
    "VLANsController",
    "L2DomainsController",
]
