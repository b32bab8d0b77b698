"""IP address wire/domain records."""

from dataclasses import dataclass
from typing import Any

from pydantic import AliasChoices, Field

from .base import WireRecord
from .scalars import BoolIntString, JSONIntString, NullableString


class AddressWire(WireRecord):
    """A phpIPAM address exactly as the API encodes it."""

    id: JSONIntString = 0
    subnet_id: JSONIntString = Field(0, alias="subnetId")
    ip_address: NullableString = Field("", alias="ip")
    is_gateway: BoolIntString = False
    description: NullableString = ""
    hostname: NullableString = ""
    mac_address: NullableString = Field("", alias="mac")
    owner: NullableString = ""
    tag: JSONIntString = 0
    # phpIPAM column is PTRignore; some clients send PTRIgnore
    ptr_ignore: BoolIntString = Field(
        False,
        validation_alias=AliasChoices("PTRignore", "PTRIgnore"),
        serialization_alias="PTRignore",
    )
    ptr_record_id: JSONIntString = Field(0, alias="PTR")
    device_id: JSONIntString = Field(0, alias="deviceId")
    port: NullableString = ""
    note: NullableString = ""
    last_seen: NullableString = Field("", alias="lastSeen")
    exclude_ping: BoolIntString = Field(False, alias="excludePing")
    edit_date: NullableString = Field("", alias="editDate")
    custom_fields: dict[str, Any] | None = None


@dataclass
class Address:
    """
    An IP address entry in phpIPAM.

    Attributes:
        id: Address entry ID
        subnet_id: ID of the owning subnet
        ip_address: The address, without a mask
        is_gateway: Address is the subnet gateway
        description: Free-form description
        hostname: Hostname
        mac_address: MAC address
        owner: Owner (customer, application, ...)
        tag: Tag ID (address state)
        ptr_ignore: Do not create PTR records for this address
        ptr_record_id: ID of the PowerDNS PTR record
        device_id: ID of the device holding this address
        port: Switchport label
        note: State notes not suited to the description
        last_seen: Timestamp of the last successful ping
        exclude_ping: Exclude from ping scans
        edit_date: Date of the last edit
        custom_fields: Nested custom fields (requires "Nest custom fields")
    """

    id: int = 0
    subnet_id: int = 0
    ip_address: str = ""
    is_gateway: bool = False
    description: str = ""
    hostname: str = ""
    mac_address: str = ""
    owner: str = ""
    tag: int = 0
    ptr_ignore: bool = False
    ptr_record_id: int = 0
    device_id: int = 0
    port: str = ""
    note: str = ""
    last_seen: str = ""
    exclude_ping: bool = False
    edit_date: str = ""
    custom_fields: dict[str, Any] | None = None

    @classmethod
    def from_wire(cls, wire: AddressWire) -> "Address":
        return cls(
            id=wire.id,
            subnet_id=wire.subnet_id,
            ip_address=wire.ip_address,
            is_gateway=wire.is_gateway,
            description=wire.description,
            hostname=wire.hostname,
            mac_address=wire.mac_address,
            owner=wire.owner,
            tag=wire.tag,
            ptr_ignore=wire.ptr_ignore,
            ptr_record_id=wire.ptr_record_id,
            device_id=wire.device_id,
            port=wire.port,
            note=wire.note,
            last_seen=wire.last_seen,
            exclude_ping=wire.exclude_ping,
            edit_date=wire.edit_date,
            custom_fields=wire.custom_fields,
        )

    def to_wire(self) -> AddressWire:
        return AddressWire(
            id=self.id,
            subnet_id=self.subnet_id,
            ip_address=self.ip_address,
            is_gateway=self.is_gateway,
            description=self.description,
            hostname=self.hostname,
            mac_address=self.mac_address,
            owner=self.owner,
            tag=self.tag,
            ptr_ignore=self.ptr_ignore,
            ptr_record_id=self.ptr_record_id,
            device_id=self.device_id,
            port=self.port,
            note=self.note,
            last_seen=self.last_seen,
            exclude_ping=self.exclude_ping,
            edit_date=self.edit_date,
            custom_fields=self.custom_fields,
        )
