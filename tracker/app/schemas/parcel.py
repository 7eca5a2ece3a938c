"""
Parcel Pydantic schema.

The Parcel entity exchanged with the parcel store.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, field_validator


def now_rfc3339() -> str:
    """Current UTC time as RFC3339 text with second precision and a Z suffix."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class Parcel(BaseModel):
    """
    Tracked shipment.

    ``number`` stays 0 until the store assigns one on insert. ``status`` is
    free-form; ParcelStatus lists the values the tracker uses.
    """
    number: int = Field(default=0, description="Store-assigned parcel number")
    client: int = Field(..., description="Owning client identifier")
    status: str = Field(..., description="Lifecycle label")
    address: str = Field(..., description="Shipping address")
    created_at: str = Field(default_factory=now_rfc3339, description="RFC3339 UTC creation time")

    @field_validator("status", mode="before")
    @classmethod
    def unwrap_status(cls, value):
        # Store the plain label, not the ParcelStatus member
        if isinstance(value, Enum):
            return value.value
        return value

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, value: str) -> str:
        normalized = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
        try:
            parsed = datetime.fromisoformat(normalized)
        except ValueError:
            raise ValueError(f"created_at must be an RFC3339 timestamp, got {value!r}")
        if "T" not in value.upper() or parsed.utcoffset() is None:
            raise ValueError(f"created_at must be an RFC3339 date-time with a zone, got {value!r}")
        return value

    class Config:
        from_attributes = True
