"""Section wire/domain records."""

from dataclasses import dataclass

from pydantic import Field

from .base import WireRecord
from .scalars import BoolIntString, JSONIntString, NullableString


class SectionWire(WireRecord):
    """A phpIPAM section exactly as the API encodes it."""

    id: JSONIntString = 0
    name: NullableString = ""
    description: NullableString = ""
    master_section: JSONIntString = Field(0, alias="masterSection")
    # JSON object, stringified
    permissions: NullableString = ""
    strict_mode: BoolIntString = Field(False, alias="strictMode")
    subnet_ordering: NullableString = Field("", alias="subnetOrdering")
    order: JSONIntString = 0
    edit_date: NullableString = Field("", alias="editDate")
    show_vlan: BoolIntString = Field(False, alias="showVLAN")
    show_vrf: BoolIntString = Field(False, alias="showVRF")
    show_supernet_only: BoolIntString = Field(False, alias="showSupernetOnly")
    dns: JSONIntString = Field(0, alias="DNS")


@dataclass
class Section:
    """
    A phpIPAM section.

    Attributes:
        id: Section ID
        name: Section name
        description: Section description
        master_section: ID of the parent section, if nested
        permissions: Stringified JSON object of group permissions
        strict_mode: Check consistency of subnets and addresses
        subnet_ordering: How subnets are ordered when viewing
        order: Display position of the section
        edit_date: Date of the last edit
        show_vlan: Show VLANs in the subnet listing
        show_vrf: Show VRFs in the subnet listing
        show_supernet_only: Show only supernets in the subnet listing
        dns: ID of the DNS resolver for the section
    """

    id: int = 0
    name: str = ""
    description: str = ""
    master_section: int = 0
    permissions: str = ""
    strict_mode: bool = False
    subnet_ordering: str = ""
    order: int = 0
    edit_date: str = ""
    show_vlan: bool = False
    show_vrf: bool = False
    show_supernet_only: bool = False
    dns: int = 0

    @classmethod
    def from_wire(cls, wire: SectionWire) -> "Section":
        return cls(
            id=wire.id,
            name=wire.name,
            description=wire.description,
            master_section=wire.master_section,
            permissions=wire.permissions,
            strict_mode=wire.strict_mode,
            subnet_ordering=wire.subnet_ordering,
            order=wire.order,
            edit_date=wire.edit_date,
            show_vlan=wire.show_vlan,
            show_vrf=wire.show_vrf,
            show_supernet_only=wire.show_supernet_only,
            dns=wire.dns,
        )

    def to_wire(self) -> SectionWire:
        return SectionWire(
            id=self.id,
            name=self.name,
            description=self.description,
            master_section=self.master_section,
            permissions=self.permissions,
            strict_mode=self.strict_mode,
            subnet_ordering=self.subnet_ordering,
            order=self.order,
            edit_date=self.edit_date,
            show_vlan=self.show_vlan,
            show_vrf=self.show_vrf,
            show_supernet_only=self.show_supernet_only,
            dns=self.dns,
        )
