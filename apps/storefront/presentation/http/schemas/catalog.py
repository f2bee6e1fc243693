"""Catalog HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class ProductResponse(BaseModel):
    id: int
    brand_id: int
    name: str
    slug: str
    description: str
    price: int = Field(..., description="가격 (센트)")
    stock: int
    sku: str
    is_featured: bool
    in_stock: bool
    image_url: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductTagResponse(BaseModel):
    id: int
    product_id: int
    name: str = Field(..., serialization_alias="tag")
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductImageResponse(BaseModel):
    id: int
    product_id: int
    url: str
    public_id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductReviewResponse(BaseModel):
    id: int
    product_id: int
    user_id: int
    rating: int
    title: str
    comment: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProductDetailsResponse(ProductResponse):
    tags: list[ProductTagResponse] = Field(default_factory=list)
    images: list[ProductImageResponse] = Field(default_factory=list)


class ProductUpdateRequest(BaseModel):
    brand_id: int | None = Field(None, gt=0)
    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    price: int | None = Field(None, ge=0)
    stock: int | None = Field(None, ge=0)
    sku: str | None = Field(None, min_length=1, max_length=64)
    is_featured: bool | None = None
    properties: dict[str, Any] | None = None


class TagUpdateRequest(BaseModel):
    tag: str = Field(..., min_length=1, max_length=120)


class ReviewCreateRequest(BaseModel):
    rating: int = Field(..., description="1~5")
    title: str = Field("", max_length=255)
    comment: str = ""


class BrandCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    slug: str = Field(..., min_length=1, max_length=120)
    type: str = Field("", max_length=64)
    description: str = ""
    email: str = Field("", max_length=320)
    website_url: str = Field("", max_length=500)


class BrandUpdateRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=120)
    slug: str | None = Field(None, min_length=1, max_length=120)
    type: str | None = Field(None, max_length=64)
    description: str | None = None
    email: str | None = Field(None, max_length=320)
    website_url: str | None = Field(None, max_length=500)


class BrandResponse(BaseModel):
    id: int
    name: str
    slug: str
    type: str
    description: str
    email: str
    website_url: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
