"""Auth HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from apps.storefront.presentation.http.schemas.users import UserResponse


class LoginRequestSchema(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, description="이메일")
    password: str = Field(..., min_length=1, description="비밀번호")


class RegisterRequestSchema(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=120)
    last_name: str = Field(..., min_length=1, max_length=120)
    username: str = Field(..., min_length=1, max_length=120)
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=256)
    gender: str | None = Field(None, max_length=16)
    locale: str = Field("en", max_length=8)


class RefreshRequestSchema(BaseModel):
    refresh_token: str | None = Field(None, description="리프레시 토큰 (없으면 헤더/쿠키 사용)")


class TokenResponse(BaseModel):
    """토큰 응답 (쿠키로도 함께 전달됩니다)."""

    access_token: str
    refresh_token: str
    access_expires_at: int = Field(..., description="액세스 토큰 만료 (Unix timestamp)")
    refresh_expires_at: int = Field(..., description="리프레시 토큰 만료 (Unix timestamp)")
    token_type: str = "bearer"


class AuthResponse(BaseModel):
    user: UserResponse
    tokens: TokenResponse


class LogoutResponse(BaseModel):
    message: str = Field(default="Successfully logged out", description="결과 메시지")


class EmailRequestSchema(BaseModel):
    email: str = Field("", max_length=320, description="이메일")


class ActionTokenRequestSchema(BaseModel):
    token: str = Field("", description="메일로 전달된 일회용 토큰")


class ResetPasswordRequestSchema(BaseModel):
    token: str = Field("", description="메일로 전달된 일회용 토큰")
    password: str = Field("", max_length=256, description="새 비밀번호")
