"""Catalog DTOs."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any, AsyncIterator

if TYPE_CHECKING:
    from apps.storefront.domain.entities.product import Product, ProductImage, ProductTag


@dataclass(frozen=True, slots=True)
class FileUpload:
    """업로드 파일 스트림과 메타데이터."""

    chunks: AsyncIterator[bytes]
    filename: str
    content_type: str | None = None


@dataclass(frozen=True)
class ProductInput:
    brand_id: int
    name: str
    slug: str
    price: int
    sku: str
    description: str = ""
    stock: int = 0
    is_featured: bool = False
    properties: dict[str, Any] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProductPatch:
    brand_id: int | None = None
    name: str | None = None
    slug: str | None = None
    description: str | None = None
    price: int | None = None
    stock: int | None = None
    sku: str | None = None
    is_featured: bool | None = None
    properties: dict[str, Any] | None = None

    def changes(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True, slots=True)
class ProductDetails:
    """생성 직후 반환되는 상품 + 태그 + 이미지."""

    product: "Product"
    tags: list["ProductTag"]
    images: list["ProductImage"]


@dataclass(frozen=True, slots=True)
class ReviewInput:
    rating: int
    title: str = ""
    comment: str = ""


@dataclass(frozen=True, slots=True)
class BrandInput:
    name: str
    slug: str
    type: str = ""
    description: str = ""
    email: str = ""
    website_url: str = ""


@dataclass(frozen=True, slots=True)
class BrandPatch:
    name: str | None = None
    slug: str | None = None
    type: str | None = None
    description: str | None = None
    email: str | None = None
    website_url: str | None = None

    def changes(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}
