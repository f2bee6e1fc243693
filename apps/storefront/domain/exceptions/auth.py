"""Authentication Exceptions.

토큰 검증 실패는 모두 UnauthenticatedError 하위 타입입니다.
HTTP 레이어는 어떤 검사가 실패했는지 노출하지 않고 동일한 401로 응답합니다.
"""

from __future__ import annotations

from apps.storefront.domain.exceptions.base import DomainError


class UnauthenticatedError(DomainError):
    """인증 실패 (클라이언트 대상)."""

    def __init__(self, message: str = "Unauthenticated") -> None:
        super().__init__(message)


class InvalidTokenSignatureError(UnauthenticatedError):
    """서명 불일치, 형식 오류, 토큰 타입 불일치."""

    def __init__(self, reason: str = "Invalid token signature") -> None:
        super().__init__(reason)


class TokenExpiredError(UnauthenticatedError):
    """만료된 토큰."""

    def __init__(self) -> None:
        super().__init__("Token has expired")


class TokenRevokedError(UnauthenticatedError):
    """세션 저장소에 없는 토큰 (로그아웃, 갱신, TTL 만료)."""

    def __init__(self, jti: str | None = None) -> None:
        self.jti = jti
        super().__init__("Token revoked or unknown")


class InvalidCredentialsError(DomainError):
    """이메일 또는 비밀번호 불일치."""

    def __init__(self) -> None:
        super().__init__("invalid credentials")


class PermissionDeniedError(DomainError):
    """권한 부족."""

    def __init__(self, message: str = "Not enough privileges") -> None:
        super().__init__(message)


class SessionNotFoundError(UnauthenticatedError):
    """세션 저장소에 토큰 식별자가 없음 (삭제 또는 TTL 만료)."""

    def __init__(self, jti: str | None = None) -> None:
        self.jti = jti
        super().__init__("Session not found")
