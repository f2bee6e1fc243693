"""SQLAlchemy implementation of address gateway."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.storefront.domain.entities.address import Address
from apps.storefront.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)


class SqlaAddressGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, address: Address) -> Address:
        with translate_db_errors("add address"):
            self._session.add(address)
            await self._session.flush()
        return address

    async def get_by_id(self, address_id: int) -> Address | None:
        with translate_db_errors("get address"):
            result = await self._session.execute(
                select(Address).where(Address.id == address_id, Address.deleted_at.is_(None))
            )
        return result.scalar_one_or_none()

    async def list_by_user_id(self, user_id: int) -> list[Address]:
        with translate_db_errors("list addresses"):
            result = await self._session.execute(
                select(Address)
                .where(Address.user_id == user_id, Address.deleted_at.is_(None))
                .order_by(Address.id)
            )
        return list(result.scalars().all())

    async def update(self, address: Address) -> Address:
        with translate_db_errors("update address"):
            merged = await self._session.merge(address)
            await self._session.flush()
        return merged
