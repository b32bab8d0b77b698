"""Normalized scalar types for phpIPAM wire records.

phpIPAM is inconsistent about JSON scalars: identifiers and counts arrive
either as numbers or as quoted digit strings, and flags arrive as "0"/"1"
strings more often than as JSON booleans. The annotated types below
collapse every accepted encoding onto one native Python value when a wire
record is validated, and always serialize back to the quoted string form
the server expects. Text fields get the same treatment for null.

Usage:
    class SectionWire(WireRecord):
        id: JSONIntString = 0
        strict_mode: BoolIntString = Field(False, alias="strictMode")

Decoding errors raise MalformedScalarError. It is not a
ValueError subclass, so pydantic lets it escape model validation unwrapped.
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from ..utils.exceptions import MalformedScalarError

_INT_LITERAL = re.compile(r"[+-]?\d+")

_TRUE_TOKENS = ("1", 1, True)
_FALSE_TOKENS = ("0", 0, False)


def decode_int(value: Any) -> int:
    """
    Decode a phpIPAM integer token.

    Accepts a JSON number, a string holding an integer literal, or an
    absent/null/empty token (which decodes to 0).

    Raises:
        MalformedScalarError: If the token is not an integer in any encoding.
    """
    if value is None:
        return 0
    # bool is an int subclass; a JSON true is never an identifier
    if isinstance(value, bool):
        raise MalformedScalarError("integer", value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if _INT_LITERAL.fullmatch(text):
            return int(text)
    raise MalformedScalarError("integer", value)


def encode_int(value: int) -> str:
    """Encode an integer as the quoted string phpIPAM sends back."""
    return str(int(value))


def decode_bool(value: Any) -> bool:
    """
    Decode a phpIPAM flag token.

    Accepts "0"/"1", JSON true/false, the numbers 0/1, or an absent/empty
    token (which decodes to False).

    Raises:
        MalformedScalarError: For any other token.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return False
    if value in _TRUE_TOKENS:
        return True
    if value in _FALSE_TOKENS:
        return False
    raise MalformedScalarError("boolean", value)


def encode_bool(value: bool) -> str:
    """Encode a flag as "1" or "0"."""
    return "1" if value else "0"


JSONIntString = Annotated[
    int,
    BeforeValidator(decode_int),
    PlainSerializer(encode_int, return_type=str),
]
"""Integer that phpIPAM may send as a number or a digit string."""

BoolIntString = Annotated[
    bool,
    BeforeValidator(decode_bool),
    PlainSerializer(encode_bool, return_type=str),
]
"""Boolean that phpIPAM encodes as a "0"/"1" string."""


def decode_str(value: Any) -> Any:
    """Decode a phpIPAM text token; null becomes "" and numbers are stringified."""
    if value is None:
        return ""
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return value


NullableString = Annotated[str, BeforeValidator(decode_str)]
"""Text field that phpIPAM may send as null."""
