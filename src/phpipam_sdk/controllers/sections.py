"""Sections controller."""

import structlog

from ..api.client import Client
from ..api.endpoints import PHPIPAMEndpoints
from ..models.sections import Section, SectionWire
from ..models.subnets import Subnet, SubnetWire

logger = structlog.get_logger(__name__)


class SectionsController(Client):
    """Client for the phpIPAM sections controller."""

    def list_sections(self) -> list[Section]:
        """List all sections."""
        envelope = self.send_request("GET", PHPIPAMEndpoints.SECTIONS)
        return [Section.from_wire(dto) for dto in SectionWire.list_from_payload(envelope.data)]

    def create_section(self, section: Section) -> str:
        """Create a section. Returns the server's confirmation message."""
        envelope = self.send_request(
            "POST", PHPIPAMEndpoints.SECTIONS, payload=section.to_wire().to_payload()
        )
        return envelope.message

    def get_section_by_id(self, section_id: int) -> Section:
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.SECTION_BY_ID.format(section_id=section_id)
        )
        return Section.from_wire(SectionWire.from_payload(envelope.data))

    def get_section_by_name(self, name: str) -> Section:
        """GET a section via its name. The API answers with a single record."""
        envelope = self.send_request("GET", PHPIPAMEndpoints.SECTION_BY_NAME.format(name=name))
        return Section.from_wire(SectionWire.from_payload(envelope.data))

    def get_subnets_in_section(self, section_id: int) -> list[Subnet]:
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.SECTION_SUBNETS.format(section_id=section_id)
        )
        return [Subnet.from_wire(dto) for dto in SubnetWire.list_from_payload(envelope.data)]

    def update_section(self, section: Section) -> None:
        """Update a section by sending a PATCH request."""
        self.send_request("PATCH", PHPIPAMEndpoints.SECTIONS, payload=section.to_wire().to_payload())

    def delete_section(self, section_id: int) -> None:
        """
        Delete a section.

        phpIPAM deletes every subnet and address in the section as well.
        That cascade happens on the server; only one DELETE is sent.
        """
        logger.info("Deleting section", section_id=section_id)
        self.send_request("DELETE", PHPIPAMEndpoints.SECTION_BY_ID.format(section_id=section_id))
