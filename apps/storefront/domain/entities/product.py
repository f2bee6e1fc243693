"""Product Entities.

상품과 하위 리소스(태그, 이미지, 리뷰)입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

PATCHABLE_FIELDS = (
    "brand_id",
    "name",
    "slug",
    "description",
    "price",
    "stock",
    "sku",
    "is_featured",
    "properties",
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """상품. price는 최소 화폐 단위(센트)입니다."""

    id: int | None = None
    brand_id: int | None = None
    name: str = ""
    slug: str = ""
    description: str = ""
    price: int = 0
    stock: int = 0
    sku: str = ""
    is_featured: bool = False
    image_url: str | None = None
    image_public_id: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def apply_patch(self, changes: dict) -> None:
        for name, value in changes.items():
            if name in PATCHABLE_FIELDS and value is not None:
                setattr(self, name, value)
        self.updated_at = _utcnow()

    def set_image(self, url: str | None, public_id: str | None) -> None:
        self.image_url = url
        self.image_public_id = public_id
        self.updated_at = _utcnow()


@dataclass
class ProductTag:
    id: int | None = None
    product_id: int | None = None
    name: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def rename(self, name: str) -> None:
        self.name = name
        self.updated_at = _utcnow()


@dataclass
class ProductImage:
    id: int | None = None
    product_id: int | None = None
    url: str = ""
    public_id: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def replace(self, url: str, public_id: str) -> None:
        self.url = url
        self.public_id = public_id
        self.updated_at = _utcnow()


@dataclass
class ProductReview:
    """상품 리뷰. rating은 1~5."""

    id: int | None = None
    product_id: int | None = None
    user_id: int | None = None
    rating: int = 5
    title: str = ""
    comment: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
