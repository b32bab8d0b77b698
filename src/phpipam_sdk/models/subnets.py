"""Subnet wire/domain records."""

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from .base import WireRecord
from .scalars import BoolIntString, JSONIntString, NullableString


class SubnetWire(WireRecord):
    """A phpIPAM subnet exactly as the API encodes it."""

    id: JSONIntString = 0
    subnet_address: NullableString = Field("", alias="subnet")
    mask: JSONIntString = 0
    description: NullableString = ""
    section_id: JSONIntString = Field(0, alias="sectionId")
    linked_subnet: JSONIntString = 0
    vlan_id: JSONIntString = Field(0, alias="vlanId")
    vrf_id: JSONIntString = Field(0, alias="vrfId")
    master_subnet_id: JSONIntString = Field(0, alias="masterSubnetId")
    nameserver_id: JSONIntString = Field(0, alias="nameserverId")
    nameservers: dict[str, Any] | None = None
    show_name: BoolIntString = Field(False, alias="showName")
    permissions: NullableString = ""
    dns_recursive: BoolIntString = Field(False, alias="DNSrecursive")
    dns_records: BoolIntString = Field(False, alias="DNSrecords")
    allow_requests: BoolIntString = Field(False, alias="allowRequests")
    scan_agent: JSONIntString = Field(0, alias="scanAgent")
    ping_subnet: BoolIntString = Field(False, alias="pingSubnet")
    discover_subnet: BoolIntString = Field(False, alias="discoverSubnet")
    is_folder: BoolIntString = Field(False, alias="isFolder")
    is_pool: BoolIntString = Field(False, alias="isPool")
    is_full: BoolIntString = Field(False, alias="isFull")
    threshold: JSONIntString = 0
    location: JSONIntString = 0
    edit_date: NullableString = Field("", alias="editDate")
    gateway: dict[str, Any] | None = None
    gateway_id: NullableString = Field("", alias="gatewayId")
    custom_fields: dict[str, Any] | None = None
    resolve_dns: BoolIntString = Field(False, alias="resolveDNS")


@dataclass
class Subnet:
    """
    A phpIPAM subnet.

    ``custom_fields`` is only populated when the API application has
    "Nest custom fields" enabled (phpIPAM 1.3+). Otherwise it stays None on
    reads and writes carrying it are rejected by the server; use the
    controller's custom field methods instead.
    """

    id: int = 0
    # Dotted quad, without the mask
    subnet_address: str = ""
    mask: int = 0
    description: str = ""
    # Required when creating
    section_id: int = 0
    linked_subnet: int = 0
    vlan_id: int = 0
    vrf_id: int = 0
    master_subnet_id: int = 0
    nameserver_id: int = 0
    nameservers: dict[str, Any] | None = None
    show_name: bool = False
    permissions: str = ""
    dns_recursive: bool = False
    dns_records: bool = False
    allow_requests: bool = False
    scan_agent: int = 0
    ping_subnet: bool = False
    discover_subnet: bool = False
    is_folder: bool = False
    # Network and broadcast addresses may be allocated
    is_pool: bool = False
    is_full: bool = False
    threshold: int = 0
    location: int = 0
    edit_date: str = ""
    gateway: dict[str, Any] | None = None
    gateway_id: str = ""
    custom_fields: dict[str, Any] | None = None
    resolve_dns: bool = False

    @classmethod
    def from_wire(cls, wire: SubnetWire) -> "Subnet":
        return cls(
            id=wire.id,
            subnet_address=wire.subnet_address,
            mask=wire.mask,
            description=wire.description,
            section_id=wire.section_id,
            linked_subnet=wire.linked_subnet,
            vlan_id=wire.vlan_id,
            vrf_id=wire.vrf_id,
            master_subnet_id=wire.master_subnet_id,
            nameserver_id=wire.nameserver_id,
            nameservers=wire.nameservers,
            show_name=wire.show_name,
            permissions=wire.permissions,
            dns_recursive=wire.dns_recursive,
            dns_records=wire.dns_records,
            allow_requests=wire.allow_requests,
            scan_agent=wire.scan_agent,
            ping_subnet=wire.ping_subnet,
            discover_subnet=wire.discover_subnet,
            is_folder=wire.is_folder,
            is_pool=wire.is_pool,
            is_full=wire.is_full,
            threshold=wire.threshold,
            location=wire.location,
            edit_date=wire.edit_date,
            gateway=wire.gateway,
            gateway_id=wire.gateway_id,
            custom_fields=wire.custom_fields,
            resolve_dns=wire.resolve_dns,
        )

    def to_wire(self) -> SubnetWire:
        return SubnetWire(
            id=self.id,
            subnet_address=self.subnet_address,
            mask=self.mask,
            description=self.description,
            section_id=self.section_id,
            linked_subnet=self.linked_subnet,
            vlan_id=self.vlan_id,
            vrf_id=self.vrf_id,
            master_subnet_id=self.master_subnet_id,
            nameserver_id=self.nameserver_id,
            nameservers=self.nameservers,
            show_name=self.show_name,
            permissions=self.permissions,
            dns_recursive=self.dns_recursive,
            dns_records=self.dns_records,
            allow_requests=self.allow_requests,
            scan_agent=self.scan_agent,
            ping_subnet=self.ping_subnet,
            discover_subnet=self.discover_subnet,
            is_folder=self.is_folder,
            is_pool=self.is_pool,
            is_full=self.is_full,
            threshold=self.threshold,
            location=self.location,
            edit_date=self.edit_date,
            gateway=self.gateway,
            gateway_id=self.gateway_id,
            custom_fields=self.custom_fields,
            resolve_dns=self.resolve_dns,
        )
