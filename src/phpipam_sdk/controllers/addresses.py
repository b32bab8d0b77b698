"""Addresses controller."""

from typing import Any

from ..api.client import Client
from ..api.endpoints import PHPIPAMEndpoints
from ..api.response_models import CustomField
from ..constants import CONTROLLER_ADDRESSES
from ..models.addresses import Address, AddressWire
from ..models.scalars import encode_bool


class AddressesController(Client):
    """Client for the phpIPAM addresses controller."""

    def create_address(self, address: Address) -> str:
        envelope = self.send_request(
            "POST", PHPIPAMEndpoints.ADDRESSES, payload=address.to_wire().to_payload()
        )
        return envelope.message

    def create_first_free_address(self, subnet_id: int, address: Address) -> str:
        """
        Allocate the first free address in a subnet.

        ``address.ip_address`` is ignored by the server. Returns the
        allocated IP when the server reports it, else the confirmation
        message.
        """
        envelope = self.send_request(
            "POST",
            PHPIPAMEndpoints.ADDRESS_FIRST_FREE.format(subnet_id=subnet_id),
            payload=address.to_wire().to_payload(),
        )
        if isinstance(envelope.data, str) and envelope.data:
            return envelope.data
        return envelope.message

    def get_address_by_id(self, address_id: int) -> Address:
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.ADDRESS_BY_ID.format(address_id=address_id)
        )
        return Address.from_wire(AddressWire.from_payload(envelope.data))

    def get_addresses_by_ip(self, ip: str) -> list[Address]:
        """
        Search addresses by IP.

        The API returns an array; the same IP can exist in several subnets
        (overlapping ranges in different sections).
        """
        envelope = self.send_request("GET", PHPIPAMEndpoints.ADDRESSES_SEARCH.format(ip=ip))
        return [Address.from_wire(dto) for dto in AddressWire.list_from_payload(envelope.data)]

    def get_address_by_ip_in_subnet(self, ip: str, subnet_id: int) -> Address:
        """Get the address with the given IP inside one subnet."""
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.ADDRESS_IN_SUBNET.format(ip=ip, subnet_id=subnet_id)
        )
        return Address.from_wire(AddressWire.from_payload(envelope.data))

    def get_address_custom_fields_schema(self) -> dict[str, CustomField]:
        return self.get_custom_fields_schema(CONTROLLER_ADDRESSES)

    def get_address_custom_fields(self, address_id: int) -> dict[str, Any]:
        return self.get_custom_fields(address_id, CONTROLLER_ADDRESSES)

    def update_address(self, address: Address) -> str:
        envelope = self.send_request(
            "PATCH", PHPIPAMEndpoints.ADDRESSES, payload=address.to_wire().to_payload()
        )
        return envelope.message

    def update_address_custom_fields(self, address_id: int, fields: dict[str, Any]) -> str:
        return self.update_custom_fields(address_id, fields, CONTROLLER_ADDRESSES)

    def delete_address(self, address_id: int, remove_dns: bool = False) -> str:
        """
        Delete an address.

        Args:
            address_id: Address entry ID
            remove_dns: Also delete related DNS records
        """
        payload = {"remove_dns": encode_bool(True)} if remove_dns else None
        envelope = self.send_request(
            "DELETE", PHPIPAMEndpoints.ADDRESS_BY_ID.format(address_id=address_id), payload=payload
        )
        return envelope.message
