"""Delete user command - Soft-deletes a user account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.domain.exceptions.user import UserNotFoundError

if TYPE_CHECKING:
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.users.ports import UserCommandGateway, UserQueryGateway

logger = logging.getLogger(__name__)


class DeleteUserInteractor:
    """사용자 삭제 유스케이스 (관리자).

    Note:
        행을 지우지 않고 deleted_at/active만 변경합니다.
        남아 있는 세션은 갱신 시점에 거부됩니다.
    """

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: int) -> None:
        """
        Raises:
            UserNotFoundError: 사용자를 찾을 수 없음
        """
        logger.info("User deletion requested", extra={"user_id": user_id})

        user = await self._user_query.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.soft_delete()
        await self._user_command.update(user)
        await self._tx.commit()

        logger.info("User deleted", extra={"user_id": user_id})
