"""L2 domains controller."""

from ..api.client import Client
from ..api.endpoints import PHPIPAMEndpoints, filter_params
from ..models.l2domains import L2Domain, L2DomainWire
from ..models.vlans import VLAN, VLANWire


class L2DomainsController(Client):
    """Client for the phpIPAM l2domains controller."""

    def list_l2domains(self) -> list[L2Domain]:
        envelope = self.send_request("GET", PHPIPAMEndpoints.L2DOMAINS)
        return [L2Domain.from_wire(dto) for dto in L2DomainWire.list_from_payload(envelope.data)]

    def create_l2domain(self, domain: L2Domain) -> str:
        envelope = self.send_request(
            "POST", PHPIPAMEndpoints.L2DOMAINS, payload=domain.to_wire().to_payload()
        )
        return envelope.message

    def get_l2domain_by_id(self, domain_id: int) -> L2Domain:
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.L2DOMAIN_BY_ID.format(domain_id=domain_id)
        )
        return L2Domain.from_wire(L2DomainWire.from_payload(envelope.data))

    def get_l2domains_by_name(self, name: str) -> list[L2Domain]:
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.L2DOMAINS, params=filter_params("name", name)
        )
        return [L2Domain.from_wire(dto) for dto in L2DomainWire.list_from_payload(envelope.data)]

    def get_vlans_in_l2domain(self, domain_id: int) -> list[VLAN]:
        envelope = self.send_request(
            "GET", PHPIPAMEndpoints.L2DOMAIN_VLANS.format(domain_id=domain_id)
        )
        return [VLAN.from_wire(dto) for dto in VLANWire.list_from_payload(envelope.data)]

    def update_l2domain(self, domain: L2Domain) -> None:
        self.send_request("PATCH", PHPIPAMEndpoints.L2DOMAINS, payload=domain.to_wire().to_payload())

    def delete_l2domain(self, domain_id: int) -> None:
        self.send_request("DELETE", PHPIPAMEndpoints.L2DOMAIN_BY_ID.format(domain_id=domain_id))
