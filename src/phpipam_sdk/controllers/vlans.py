"""VLANs controller."""

from typing import Any

import structlog

from ..api.client import Client
from ..api.endpoints import PHPIPAMEndpoints, filter_params
from ..api.response_models import CustomField
from ..constants import CONTROLLER_VLANS
from ..models.vlans import VLAN, VLANWire
from ..observability.logger import LogContext
from ..utils.exceptions import UnknownCustomFieldError

logger = structlog.get_logger(__name__)


class VLANsController(Client):
    """Client for the phpIPAM VLAN controller."""

    def create_vlan(self, vlan: VLAN) -> str:
        envelope = self.send_request(
            "POST", PHPIPAMEndpoints.VLANS, payload=vlan.to_wire().to_payload()
        )
        return envelope.message

    def get_vlan_by_id(self, vlan_id: int) -> VLAN:
        """GET a VLAN via its database ID (not its VLAN number)."""
        envelope = self.send_request("GET", PHPIPAMEndpoints.VLAN_BY_ID.format(vlan_id=vlan_id))
        return VLAN.from_wire(VLANWire.from_payload(envelope.data))

    def get_vlans_by_number(self, number: int) -> list[VLAN]:
        """
        Search VLANs by VLAN number.

        The API answers with an array. The same number may exist in several
        L2 domains; use get_vlans_by_number_and_domain_id to narrow it down.
        """
        envelope = self.send_request("GET", PHPIPAMEndpoints.VLANS_SEARCH.format(number=number))
        return [VLAN.from_wire(dto) for dto in VLANWire.list_from_payload(envelope.data)]

    def get_vlans_by_number_and_domain_id(self, number: int, domain_id: int) -> list[VLAN]:
        envelope = self.send_request(
            "GET",
            PHPIPAMEndpoints.VLANS_SEARCH.format(number=number),
            params=filter_params("domainId", domain_id),
        )
        return [VLAN.from_wire(dto) for dto in VLANWire.list_from_payload(envelope.data)]

    def get_vlan_custom_fields_schema(self) -> dict[str, CustomField]:
        return self.get_custom_fields_schema(CONTROLLER_VLANS)

    def get_vlan_custom_fields(self, vlan_id: int) -> dict[str, Any]:
        return self.get_custom_fields(vlan_id, CONTROLLER_VLANS)

    def update_vlan(self, vlan: VLAN) -> str:
        envelope = self.send_request(
            "PATCH", PHPIPAMEndpoints.VLANS, payload=vlan.to_wire().to_payload()
        )
        return envelope.message

    def update_vlan_custom_fields(self, vlan_id: int, name: str, fields: dict[str, Any]) -> str:
        """
        PATCH a VLAN's custom fields.

        Unlike subnets and addresses, phpIPAM needs the VLAN name alongside
        the ID for this update. Every key is checked against the VLAN custom
        field schema first; nothing is sent if one is unknown.

        Raises:
            UnknownCustomFieldError: If a key is not a VLAN custom field
        """
        with LogContext(controller=CONTROLLER_VLANS, resource_id=vlan_id):
            schema = self.get_vlan_custom_fields_schema()
            for key in fields:
                if key not in schema:
                    logger.warning("Unknown custom field", field=key)
                    raise UnknownCustomFieldError(key, CONTROLLER_VLANS)

            params = dict(fields)
            params["id"] = vlan_id
            params["name"] = name
            envelope = self.send_request("PATCH", PHPIPAMEndpoints.VLANS, payload=params)
        return envelope.message

    def delete_vlan(self, vlan_id: int) -> str:
        envelope = self.send_request(
            "DELETE", PHPIPAMEndpoints.VLAN_BY_ID.format(vlan_id=vlan_id)
        )
        return envelope.message
