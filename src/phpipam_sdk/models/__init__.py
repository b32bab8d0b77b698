"""Wire and domain records for phpIPAM resources."""

from .addresses import Address, AddressWire
from .base import WireRecord
from .l2domains import L2Domain, L2DomainWire
from .scalars import (
    BoolIntString,
    JSONIntString,
    NullableString,
    decode_bool,
    decode_int,
    encode_bool,
    encode_int,
)
from .sections import Section, SectionWire
from .subnets import Subnet, SubnetWire
from .vlans import VLAN, VLANWire

__all__ = [
    "WireRecord",
    "JSONIntString",
    "BoolIntString",
    "NullableString",
    "decode_int",
    "encode_int",
    "decode_bool",
    "encode_bool",
    "Section",
    "SectionWire",
    "Subnet",
    "SubnetWire",
    "Address",
    "AddressWire",
    "VLAN",
    "VLANWire",
    "L2Domain",
    "L2DomainWire",
]
