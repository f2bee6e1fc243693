"""Address HTTP schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AddressCreateRequest(BaseModel):
    line_1: str = Field(..., min_length=1, max_length=255)
    line_2: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=120)
    country: str = Field(..., min_length=1, max_length=120)
    state: str | None = Field(None, max_length=120)
    zip: str = Field(..., min_length=1, max_length=32)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    phone: str | None = Field(None, max_length=32)


class AddressUpdateRequest(BaseModel):
    line_1: str | None = Field(None, min_length=1, max_length=255)
    line_2: str | None = Field(None, max_length=255)
    city: str | None = Field(None, min_length=1, max_length=120)
    country: str | None = Field(None, min_length=1, max_length=120)
    state: str | None = Field(None, max_length=120)
    zip: str | None = Field(None, min_length=1, max_length=32)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    phone: str | None = Field(None, max_length=32)


class AddressResponse(BaseModel):
    id: int
    user_id: int
    line_1: str
    line_2: str | None = None
    city: str
    country: str
    state: str | None = None
    zip: str
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None
    address_type: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
