"""VLAN wire/domain records."""

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from .base import WireRecord
from .scalars import JSONIntString, NullableString


class VLANWire(WireRecord):
    """A phpIPAM VLAN exactly as the API encodes it."""

    id: JSONIntString = 0
    domain_id: JSONIntString = Field(0, alias="domainId")
    name: NullableString = ""
    number: JSONIntString = 0
    description: NullableString = ""
    edit_date: NullableString = Field("", alias="editDate")
    custom_fields: dict[str, Any] | None = None


@dataclass
class VLAN:
    """
    A phpIPAM VLAN.

    ``id`` is the database entry ID, not the 802.1Q tag; that is ``number``.
    """

    id: int = 0
    domain_id: int = 0
    name: str = ""
    number: int = 0
    description: str = ""
    edit_date: str = ""
    custom_fields: dict[str, Any] | None = None

    @classmethod
    def from_wire(cls, wire: VLANWire) -> "VLAN":
        return cls(
            id=wire.id,
            domain_id=wire.domain_id,
            name=wire.name,
            number=wire.number,
            description=wire.description,
            edit_date=wire.edit_date,
            custom_fields=wire.custom_fields,
        )

    def to_wire(self) -> VLANWire:
        return VLANWire(
            id=self.id,
            domain_id=self.domain_id,
            name=self.name,
            number=self.number,
            description=self.description,
            edit_date=self.edit_date,
            custom_fields=self.custom_fields,
        )
