"""Address Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

PHYSICAL_ADDRESS = "physical"

PATCHABLE_FIELDS = (
    "line_1",
    "line_2",
    "city",
    "country",
    "state",
    "zip",
    "latitude",
    "longitude",
    "phone",
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Address:
    """사용자 배송지."""

    id: int | None = None
    user_id: int | None = None
    line_1: str = ""
    line_2: str | None = None
    city: str = ""
    country: str = ""
    state: str | None = None
    zip: str = ""
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None
    address_type: str = PHYSICAL_ADDRESS
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    deleted_at: datetime | None = None

    def apply_patch(self, changes: dict) -> None:
        for name, value in changes.items():
            if name in PATCHABLE_FIELDS and value is not None:
                setattr(self, name, value)
        self.updated_at = _utcnow()

    def belongs_to(self, user_id: int) -> bool:
        return self.user_id == user_id and self.deleted_at is None
