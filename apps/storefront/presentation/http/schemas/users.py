"""User-related HTTP schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """사용자 응답 스키마. 비밀번호 해시는 포함하지 않습니다."""

    id: int
    first_name: str
    last_name: str
    username: str
    email: str
    role: str
    gender: str | None = None
    locale: str
    avatar_url: str | None = None
    active: bool
    email_verified: bool
    last_login_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class UserUpdateRequest(BaseModel):
    """프로필 수정 요청. 모든 필드 선택."""

    first_name: str | None = Field(None, min_length=1, max_length=120)
    last_name: str | None = Field(None, min_length=1, max_length=120)
    username: str | None = Field(None, min_length=1, max_length=120)
    gender: str | None = Field(None, max_length=16)
    locale: str | None = Field(None, min_length=2, max_length=8)


class ChangePasswordRequestSchema(BaseModel):
    old_password: str = ""
    new_password: str = ""
    confirm_password: str = ""


class AvatarResponse(BaseModel):
    avatar_url: str
    avatar_public_id: str
