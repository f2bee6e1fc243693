"""Address Commands.

현재 사용자의 배송지 생성/수정/삭제입니다.
다른 사용자의 배송지는 존재하지 않는 것으로 취급합니다 (AddressNotFoundError).
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from apps.storefront.application.addresses.dto import AddressInput, AddressPatch
from apps.storefront.domain.entities.address import Address
from apps.storefront.domain.exceptions.catalog import AddressNotFoundError
from apps.storefront.domain.exceptions.validation import NoChangesProvidedError

if TYPE_CHECKING:
    from apps.storefront.application.addresses.ports import AddressGateway
    from apps.storefront.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


async def load_owned_address(gateway: "AddressGateway", user_id: int, address_id: int) -> Address:
    address = await gateway.get_by_id(address_id)
    if address is None or not address.belongs_to(user_id):
        raise AddressNotFoundError(address_id)
    return address


class CreateAddressInteractor:
    def __init__(self, address_gateway: "AddressGateway", transaction_manager: "TransactionManager") -> None:
        self._gateway = address_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: int, data: AddressInput) -> Address:
        address = await self._gateway.add(Address(user_id=user_id, **asdict(data)))
        await self._tx.commit()
        logger.info("Address created", extra={"user_id": user_id, "address_id": address.id})
        return address


class UpdateAddressInteractor:
    def __init__(self, address_gateway: "AddressGateway", transaction_manager: "TransactionManager") -> None:
        self._gateway = address_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: int, address_id: int, patch: AddressPatch) -> Address:
        """
        Raises:
            NoChangesProvidedError: 변경사항 없음
            AddressNotFoundError: 없거나 다른 사용자의 배송지
        """
        changes = patch.changes()
        if not changes:
            raise NoChangesProvidedError()

        address = await load_owned_address(self._gateway, user_id, address_id)
        address.apply_patch(changes)
        address = await self._gateway.update(address)
        await self._tx.commit()
        return address


class DeleteAddressInteractor:
    def __init__(self, address_gateway: "AddressGateway", transaction_manager: "TransactionManager") -> None:
        self._gateway = address_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: int, address_id: int) -> None:
        address = await load_owned_address(self._gateway, user_id, address_id)
        address.deleted_at = datetime.now(timezone.utc)
        await self._gateway.update(address)
        await self._tx.commit()
        logger.info("Address deleted", extra={"user_id": user_id, "address_id": address_id})
