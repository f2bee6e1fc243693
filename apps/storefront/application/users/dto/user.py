"""Users DTOs."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.storefront.application.token.ports import TokenPair
    from apps.storefront.domain.entities.user import User


@dataclass(frozen=True, slots=True)
class RegisterUserRequest:
    first_name: str
    last_name: str
    username: str
    email: str
    password: str
    gender: str | None = None
    locale: str = "en"


@dataclass(frozen=True, slots=True)
class LoginRequest:
    email: str
    password: str


@dataclass(frozen=True, slots=True)
class AuthResult:
    """로그인/가입 결과: 사용자와 발급된 토큰 쌍."""

    user: "User"
    tokens: "TokenPair"


@dataclass(frozen=True, slots=True)
class ProfileUpdate:
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    gender: str | None = None
    locale: str | None = None

    def has_changes(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))


@dataclass(frozen=True, slots=True)
class ChangePasswordRequest:
    old_password: str
    new_password: str
    confirm_password: str

    def is_consistent(self) -> bool:
        return bool(self.new_password) and self.new_password == self.confirm_password
