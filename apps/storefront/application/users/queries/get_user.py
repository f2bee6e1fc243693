"""GetUser Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.storefront.domain.exceptions.user import UserNotFoundError

if TYPE_CHECKING:
    from apps.storefront.application.users.ports import UserQueryGateway
    from apps.storefront.domain.entities.user import User


class GetUserQuery:
    """사용자 조회 Query. 현재 사용자(/me)와 ID 조회에 모두 사용합니다."""

    def __init__(self, user_query_gateway: "UserQueryGateway") -> None:
        self._user_query = user_query_gateway

    async def execute(self, user_id: int) -> "User":
        user = await self._user_query.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
