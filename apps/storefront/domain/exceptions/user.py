"""User Exceptions."""

from __future__ import annotations

from apps.storefront.domain.exceptions.base import DomainError


class UserNotFoundError(DomainError):
    """사용자를 찾을 수 없음."""

    def __init__(self, user_id: int | str | None = None) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}" if user_id is not None else "User not found")


class UserAlreadyExistsError(DomainError):
    """이메일 또는 사용자명 중복."""

    def __init__(self) -> None:
        super().__init__("User with this email or username already exists")


class InvalidPasswordError(DomainError):
    """비밀번호 변경 요청 오류."""

    def __init__(self, message: str = "invalid password provided") -> None:
        super().__init__(message)


class InvalidActionTokenError(DomainError):
    """이메일 인증/비밀번호 재설정 토큰이 없거나 만료되었거나 이미 사용됨."""

    def __init__(self) -> None:
        super().__init__("token is invalid or has expired")
