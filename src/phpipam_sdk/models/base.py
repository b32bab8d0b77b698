"""Shared base for phpIPAM wire records.

A wire record mirrors the JSON object phpIPAM sends and accepts for one
resource kind. Every field is optional on the wire: absent fields decode to
their zero value, and zero-valued fields are left out of request bodies
rather than sent as null, 0 or "0".
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from ..utils.exceptions import PHPIPAMAPIError


class WireRecord(BaseModel):
    """Base model for all phpIPAM wire records."""

    # Unknown server fields are dropped so they never leak into PATCH bodies
    model_config = {"extra": "ignore", "populate_by_name": True}

    def to_payload(self) -> dict[str, Any]:
        """
        Serialize to a request body using phpIPAM field names.

        Returns:
            Dict of aliased fields with zero values and empty maps omitted.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_defaults=True)
        return {key: value for key, value in data.items() if value != {}}

    @classmethod
    def from_payload(cls, data: Any) -> "WireRecord":
        """Decode a single JSON object (None decodes to an all-zero record)."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise PHPIPAMAPIError(
                f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise PHPIPAMAPIError(f"Malformed {cls.__name__} record: {e}") from e

    @classmethod
    def list_from_payload(cls, data: Any) -> list[Any]:
        """
        Decode a JSON array of records, preserving server order.

        An empty array or a missing payload decodes to an empty list.
        """
        if data is None:
            return []
        if not isinstance(data, list):
            raise PHPIPAMAPIError(
                f"Expected a JSON array of {cls.__name__}, got {type(data).__name__}"
            )
        return [cls.from_payload(item) for item in data]
