"""Subnets controller."""

from typing import Any

from ..api.client import Client
from ..api.endpoints import PHPIPAMEndpoints, filter_params
from ..api.response_models import CustomField
from ..constants import CONTROLLER_SUBNETS
from ..models.addresses import Address, AddressWire
from ..models.subnets import Subnet, SubnetWire


class SubnetsController(Client):
    """Client for the phpIPAM subnets controller."""

    def create_subnet(self, subnet: Subnet) -> str:
        """Create a subnet. ``section_id`` is required by the server."""
        envelope = self.send_request(
            "POST", PHPIPAMEndpoints.SUBNETS, payload=subnet.to_wire().to_payload()
        )
        return envelope.message

    def create_first_free_subnet(self, subnet_id: int, mask: int, subnet: Subnet) -> str:
        """Create the first free child subnet of the given mask inside a subnet."""
        envelope = self.send_request(
            "POST",
            PHPIPAMEndpoints.SUBNET_FIRST_SUBNET.format(subnet_id=subnet_id, mask=mask),
            payload=subnet.to_wire().to_payload(),
        )
        return envelope.message

    def get_subnet_by_id(self, subnet_id: int) -> Subnet:
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.SUBNET_BY_ID.format(subnet_id=subnet_id)
        )
        return Subnet.from_wire(SubnetWire.from_payload(envelope.data))

    def get_subnets_by_cidr(self, cidr: str) -> list[Subnet]:
        """
        Search subnets by CIDR (e.g. "10.10.1.0/24").

        The API returns an array, although no known query yields more than
        one result: a broader CIDR does not match children, and a master
        subnet's CIDR returns only the master.
        """
        envelope = self.send_request("GET", PHPIPAMEndpoints.SUBNETS_BY_CIDR.format(cidr=cidr))
        return [Subnet.from_wire(dto) for dto in SubnetWire.list_from_payload(envelope.data)]

    def get_subnets_by_cidr_and_section(self, cidr: str, section_id: int) -> list[Subnet]:
        """Search subnets by CIDR, restricted to one section."""
        envelope = self.send_request(
            "GET",
            PHPIPAMEndpoints.SUBNETS_BY_CIDR.format(cidr=cidr),
            params=filter_params("sectionId", section_id),
        )
        return [Subnet.from_wire(dto) for dto in SubnetWire.list_from_payload(envelope.data)]

    def get_first_free_subnet(self, subnet_id: int, mask: int) -> str:
        """Get the first free child subnet (CIDR string) of the given mask."""
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.SUBNET_FIRST_SUBNET.format(subnet_id=subnet_id, mask=mask)
        )
        return str(envelope.data) if envelope.data else ""

    def get_first_free_address(self, subnet_id: int) -> str:
        """
        Get the first free IP address in a subnet.

        Returns an empty string when the subnet has no free addresses.
        Marking a subnet as full does not stop this from returning data.
        """
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.SUBNET_FIRST_FREE.format(subnet_id=subnet_id)
        )
        return str(envelope.data) if envelope.data else ""

    def get_addresses_in_subnet(self, subnet_id: int) -> list[Address]:
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.SUBNET_ADDRESSES.format(subnet_id=subnet_id)
        )
        return [Address.from_wire(dto) for dto in AddressWire.list_from_payload(envelope.data)]

    def get_subnet_custom_fields_schema(self) -> dict[str, CustomField]:
        return self.get_custom_fields_schema(CONTROLLER_SUBNETS)

    def get_subnet_custom_fields(self, subnet_id: int) -> dict[str, Any]:
        return self.get_custom_fields(subnet_id, CONTROLLER_SUBNETS)

    def update_subnet(self, subnet: Subnet) -> str:
        """
        Update a subnet by sending a PATCH request.

        This cannot change the subnet's CIDR; splitting, resizing and
        renumbering are separate API calls.
        """
        envelope = self.send_request(
            "PATCH", PHPIPAMEndpoints.SUBNETS, payload=subnet.to_wire().to_payload()
        )
        return envelope.message

    def update_subnet_custom_fields(self, subnet_id: int, fields: dict[str, Any]) -> str:
        return self.update_custom_fields(subnet_id, fields, CONTROLLER_SUBNETS)

    def delete_subnet(self, subnet_id: int) -> str:
        envelope = self.send_request(
            "DELETE", PHPIPAMEndpoints.SUBNET_BY_ID.format(subnet_id=subnet_id)
        )
        return envelope.message
