"""User Entity.

ORM과 분리된 순수 도메인 엔티티입니다.
테이블 매핑은 infrastructure/persistence_postgres/mappings/users.py에서 정의합니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from apps.storefront.domain.enums.user_role import UserRole


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """사용자 엔티티.

    password에는 항상 해시된 값만 저장됩니다.
    """

    id: int | None = None
    first_name: str = ""
    last_name: str = ""
    username: str = ""
    email: str = ""
    password: str = ""
    role: str = UserRole.USER.value
    gender: str | None = None
    locale: str = "en"
    avatar_url: str | None = None
    avatar_public_id: str | None = None
    active: bool = True
    email_verified: bool = False
    failed_attempts: int = 0
    last_login_at: datetime | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    deleted_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @property
    def can_login(self) -> bool:
        return self.active and self.deleted_at is None

    def touch(self) -> None:
        self.updated_at = _utcnow()

    def update_profile(
        self,
        *,
        first_name: str | None = None,
        last_name: str | None = None,
        username: str | None = None,
        gender: str | None = None,
        locale: str | None = None,
    ) -> None:
        """프로필 정보를 업데이트합니다. None인 필드는 유지됩니다."""
        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name
        if username is not None:
            self.username = username
        if gender is not None:
            self.gender = gender
        if locale is not None:
            self.locale = locale
        self.touch()

    def change_password(self, hashed_password: str) -> None:
        self.password = hashed_password
        self.touch()

    def verify_email(self) -> None:
        self.email_verified = True
        self.touch()

    def record_login(self) -> None:
        self.last_login_at = _utcnow()
        self.failed_attempts = 0

    def record_failed_login(self) -> None:
        self.failed_attempts += 1

    def set_avatar(self, url: str | None, public_id: str | None) -> None:
        self.avatar_url = url
        self.avatar_public_id = public_id
        self.touch()

    def soft_delete(self) -> None:
        self.active = False
        self.deleted_at = _utcnow()
        self.touch()

    def __repr__(self) -> str:
        return f"User(id={self.id}, username={self.username!r})"
