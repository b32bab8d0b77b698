"""Centralized API endpoint configuration for the phpIPAM REST API.

Paths are relative to ``{endpoint}/{app_id}`` and keep phpIPAM's trailing
slash convention.

Usage:
    from phpipam_sdk.api.endpoints import PHPIPAMEndpoints

    path = PHPIPAMEndpoints.SUBNET_ADDRESSES.format(subnet_id=12)
    # Returns: "/subnets/12/addresses/"
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PHPIPAMEndpoints:
    """phpIPAM REST API endpoint constants."""

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------
    USER: str = "/user/"

    # -------------------------------------------------------------------------
    # Custom fields (generic per controller)
    # -------------------------------------------------------------------------
    CONTROLLER: str = "/{controller}/"
    CONTROLLER_BY_ID: str = "/{controller}/{resource_id}/"
    CUSTOM_FIELDS: str = "/{controller}/custom_fields/"

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------
    SECTIONS: str = "/sections/"
    SECTION_BY_ID: str = "/sections/{section_id}/"
    SECTION_BY_NAME: str = "/sections/{name}/"
    SECTION_SUBNETS: str = "/sections/{section_id}/subnets/"

    # -------------------------------------------------------------------------
    # Subnets
    # -------------------------------------------------------------------------
    SUBNETS: str = "/subnets/"
    SUBNET_BY_ID: str = "/subnets/{subnet_id}/"
    SUBNETS_BY_CIDR: str = "/subnets/cidr/{cidr}/"
    SUBNET_FIRST_SUBNET: str = "/subnets/{subnet_id}/first_subnet/{mask}/"
    SUBNET_FIRST_FREE: str = "/subnets/{subnet_id}/first_free/"
    SUBNET_ADDRESSES: str = "/subnets/{subnet_id}/addresses/"

    # -------------------------------------------------------------------------
    # Addresses
    # -------------------------------------------------------------------------
    ADDRESSES: str = "/addresses/"
    ADDRESS_BY_ID: str = "/addresses/{address_id}/"
    ADDRESS_FIRST_FREE: str = "/addresses/first_free/{subnet_id}/"
    ADDRESSES_SEARCH: str = "/addresses/search/{ip}/"
    ADDRESS_IN_SUBNET: str = "/addresses/{ip}/{subnet_id}/"

    # -------------------------------------------------------------------------
    # VLANs
    # -------------------------------------------------------------------------
    VLANS: str = "/vlans/"
    VLAN_BY_ID: str = "/vlans/{vlan_id}/"
    VLANS_SEARCH: str = "/vlans/search/{number}/"

    # -------------------------------------------------------------------------
    # L2 domains
    # -------------------------------------------------------------------------
    L2DOMAINS: str = "/l2domains/"
    L2DOMAIN_BY_ID: str = "/l2domains/{domain_id}/"
    L2DOMAIN_VLANS: str = "/l2domains/{domain_id}/vlans/"


def filter_params(field: str, value: object) -> dict[str, str]:
    """Build phpIPAM's ``filter_by``/``filter_value`` query parameters."""
    return {"filter_by": field, "filter_value": str(value)}
