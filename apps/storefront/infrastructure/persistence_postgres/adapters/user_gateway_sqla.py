"""SQLAlchemy implementation of user gateways."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.storefront.domain.entities.user import User
from apps.storefront.domain.exceptions.user import UserAlreadyExistsError
from apps.storefront.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)


class SqlaUserQueryGateway:
    """사용자 조회 게이트웨이 SQLAlchemy 구현. 삭제된 사용자는 제외합니다."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: int) -> User | None:
        with translate_db_errors("get user"):
            result = await self._session.execute(
                select(User).where(User.id == user_id, User.deleted_at.is_(None))
            )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> User | None:
        with translate_db_errors("get user by email"):
            result = await self._session.execute(
                select(User).where(User.email == email, User.deleted_at.is_(None))
            )
        return result.scalar_one_or_none()


class SqlaUserCommandGateway:
    """사용자 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, user: User) -> User:
        """새 사용자를 생성합니다."""
        with translate_db_errors("add user", on_conflict=UserAlreadyExistsError):
            self._session.add(user)
            await self._session.flush()
        return user

    async def update(self, user: User) -> User:
        """사용자 정보를 업데이트합니다."""
        with translate_db_errors("update user", on_conflict=UserAlreadyExistsError):
            merged = await self._session.merge(user)
            await self._session.flush()
        return merged
