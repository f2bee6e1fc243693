"""Address Queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.storefront.application.addresses.commands.manage_address import load_owned_address

if TYPE_CHECKING:
    from apps.storefront.application.addresses.ports import AddressGateway
    from apps.storefront.domain.entities.address import Address


class GetAddressQuery:
    def __init__(self, address_gateway: "AddressGateway") -> None:
        self._gateway = address_gateway

    async def execute(self, user_id: int, address_id: int) -> "Address":
        return await load_owned_address(self._gateway, user_id, address_id)


class ListAddressesQuery:
    def __init__(self, address_gateway: "AddressGateway") -> None:
        self._gateway = address_gateway

    async def execute(self, user_id: int) -> list["Address"]:
        return await self._gateway.list_by_user_id(user_id)
