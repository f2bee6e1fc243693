"""User gateway ports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.storefront.domain.entities.user import User


class UserQueryGateway(Protocol):
    """사용자 조회 포트."""

    async def get_by_id(self, user_id: int) -> User | None:
        """삭제되지 않은 사용자를 ID로 조회합니다."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """정규화된 이메일로 사용자를 조회합니다."""
        ...


class UserCommandGateway(Protocol):
    """사용자 생성/수정 포트."""

    async def add(self, user: User) -> User:
        """사용자를 추가합니다.

        Raises:
            UserAlreadyExistsError: 이메일/사용자명 중복
        """
        ...

    async def update(self, user: User) -> User:
        """변경된 사용자 정보를 반영합니다.

        Raises:
            UserAlreadyExistsError: 사용자명 중복
        """
        ...
