"""Pydantic models for phpIPAM API responses.

Every phpIPAM response is wrapped in the same envelope:

    {"code": 200, "success": true, "data": ..., "message": "...", "time": 0.01}

GETs carry their payload in ``data``; mutations usually answer with a
human-readable ``message`` and, for creates, the new ``id``.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class APIResponse(BaseModel):
    """The phpIPAM response envelope.

    Attributes:
        code: HTTP status code echoed by the server
        success: Whether the server considers the call successful
        message: Confirmation or error message
        data: Decoded payload (object, array or scalar)
        id: ID of a newly created resource
        time: Server processing time in seconds
    """

    code: int | None = Field(None, description="Echoed HTTP status code")
    success: bool = Field(True, description="Server-side success flag")
    message: str = Field("", description="Confirmation or error message")
    data: Any = Field(None, description="Response payload")
    id: str | None = Field(None, description="ID of a created resource")
    time: float | None = Field(None, description="Server processing time")

    model_config = {"extra": "allow"}

    @field_validator("success", mode="before")
    @classmethod
    def coerce_success(cls, v: Any) -> Any:
        """Older phpIPAM releases send success as 0/1."""
        if v in (0, "0"):
            return False
        if v in (1, "1"):
            return True
        return v

    @field_validator("message", mode="before")
    @classmethod
    def coerce_message(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str | None:
        if v is None:
            return None
        return str(v)


class TokenData(BaseModel):
    """``data`` of a successful POST /user/ (authentication)."""

    token: str = Field(..., min_length=1, description="API session token")
    expires: str | None = Field(None, description="Token expiry timestamp")

    model_config = {"extra": "allow"}


class CustomField(BaseModel):
    """Schema descriptor of one custom field.

    phpIPAM exposes custom fields as extra table columns, so the descriptor
    is the column metadata.

    Attributes:
        name: Field name
        type: SQL column type (e.g. "varchar(255)")
        comment: Field description
        null: "YES" if the field is nullable
        default: Default value
    """

    name: str = ""
    type: str = ""
    comment: str | None = Field(None, alias="Comment")
    null: str | None = Field(None, alias="Null")
    default: str | None = Field(None, alias="Default")

    model_config = {"extra": "allow", "populate_by_name": True}
