"""
Unit tests for the Parcel entity.
"""

import pytest
from pydantic import ValidationError

from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import Parcel, now_rfc3339


def test_now_rfc3339_is_utc_and_sortable():
    value = now_rfc3339()
    assert value.endswith("Z")
    assert len(value) == len("2024-01-01T00:00:00Z")
    assert value[10] == "T"


def test_status_enum_is_stored_as_plain_label():
    parcel = Parcel(client=1, status=ParcelStatus.SENT, address="a")
    assert parcel.status == "sent"
    assert type(parcel.status) is str


def test_number_defaults_to_zero():
    assert Parcel(client=1, status="registered", address="a").number == 0


@pytest.mark.parametrize("created_at", [
    "2024-03-01T10:00:00Z",
    "2024-03-01T10:00:00+03:00",
    "2024-03-01T10:00:00.123456Z",
])
def test_accepts_rfc3339_timestamps(created_at):
    parcel = Parcel(client=1, status="registered", address="a", created_at=created_at)
    assert parcel.created_at == created_at


@pytest.mark.parametrize("created_at", [
    "yesterday",
    "2024-03-01",
    "2024-03-01T10:00:00",
    "2024-03-01 10:00:00Z",
])
def test_rejects_non_rfc3339_timestamps(created_at):
    with pytest.raises(ValidationError):
        Parcel(client=1, status="registered", address="a", created_at=created_at)


def test_empty_status_accepted():
    assert Parcel(client=1, status="", address="a").status == ""
