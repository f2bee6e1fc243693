"""Brand gateway port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.storefront.domain.entities.brand import Brand


class BrandGateway(Protocol):
    async def add(self, brand: Brand) -> Brand:
        ...

    async def get_by_id(self, brand_id: int) -> Brand | None:
        ...

    async def list_all(self) -> list[Brand]:
        ...

    async def update(self, brand: Brand) -> Brand:
        ...

    async def delete(self, brand_id: int) -> int:
        ...
