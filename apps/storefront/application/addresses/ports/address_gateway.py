"""Address gateway port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apps.storefront.domain.entities.address import Address


class AddressGateway(Protocol):
    """배송지 저장소 포트. 삭제된 배송지는 조회되지 않습니다."""

    async def add(self, address: Address) -> Address:
        ...

    async def get_by_id(self, address_id: int) -> Address | None:
        ...

    async def list_by_user_id(self, user_id: int) -> list[Address]:
        ...

    async def update(self, address: Address) -> Address:
        ...
