"""Brand Entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from apps.storefront.domain.value_objects.email import normalize_email

PATCHABLE_FIELDS = ("name", "slug", "type", "description", "email", "website_url")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Brand:
    """상품 브랜드."""

    id: int | None = None
    name: str = ""
    slug: str = ""
    type: str = ""
    description: str = ""
    email: str = ""
    website_url: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        self.email = normalize_email(self.email)

    def apply_patch(self, changes: dict) -> None:
        for name, value in changes.items():
            if name in PATCHABLE_FIELDS and value is not None:
                setattr(self, name, value)
        self.email = normalize_email(self.email)
        self.updated_at = _utcnow()
