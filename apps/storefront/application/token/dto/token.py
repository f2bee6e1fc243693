"""Token DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LogoutRequest:
    """로그아웃 요청."""

    access_token: str | None = None
    refresh_token: str | None = None


@dataclass(frozen=True, slots=True)
class LogoutResult:
    deleted: int


@dataclass(frozen=True, slots=True)
class RefreshTokensRequest:
    """토큰 갱신 요청."""

    refresh_token: str


@dataclass(frozen=True, slots=True)
class AuthSession:
    """검증된 액세스 토큰의 소유자와 식별자."""

    user_id: int
    access_uuid: str
