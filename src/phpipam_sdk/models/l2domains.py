"""Layer 2 domain wire/domain records."""

from dataclasses import dataclass

from .base import WireRecord
from .scalars import JSONIntString, NullableString


class L2DomainWire(WireRecord):
    """A phpIPAM L2 domain exactly as the API encodes it."""

    id: JSONIntString = 0
    name: NullableString = ""
    description: NullableString = ""
    sections: NullableString = ""


@dataclass
class L2Domain:
    id: int = 0
    name: str = ""
    description: str = ""
    # Semicolon-separated IDs of the sections the domain is visible in
    sections: str = ""

    @classmethod
    def from_wire(cls, wire: L2DomainWire) -> "L2Domain":
        return cls(
            id=wire.id,
            name=wire.name,
            description=wire.description,
            sections=wire.sections,
        )

    def to_wire(self) -> L2DomainWire:
        return L2DomainWire(
            id=self.id,
            name=self.name,
            description=self.description,
            sections=self.sections,
        )
