"""SQLAlchemy implementation of brand gateway."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.storefront.domain.entities.brand import Brand
from apps.storefront.infrastructure.persistence_postgres.adapters.errors import (
    translate_db_errors,
)


class SqlaBrandGateway:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, brand: Brand) -> Brand:
        with translate_db_errors("add brand"):
            self._session.add(brand)
            await self._session.flush()
        return brand

    async def get_by_id(self, brand_id: int) -> Brand | None:
        with translate_db_errors("get brand"):
            return await self._session.get(Brand, brand_id)

    async def list_all(self) -> list[Brand]:
        with translate_db_errors("list brands"):
            result = await self._session.execute(select(Brand).order_by(Brand.id))
        return list(result.scalars().all())

    async def update(self, brand: Brand) -> Brand:
        with translate_db_errors("update brand"):
            merged = await self._session.merge(brand)
            await self._session.flush()
        return merged

    async def delete(self, brand_id: int) -> int:
        with translate_db_errors("delete brand"):
            result = await self._session.execute(delete(Brand).where(Brand.id == brand_id))
        return result.rowcount
