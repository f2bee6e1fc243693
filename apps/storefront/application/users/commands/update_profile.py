"""Update profile command - Updates user profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.users.dto import ProfileUpdate
from apps.storefront.domain.exceptions.user import UserNotFoundError
from apps.storefront.domain.exceptions.validation import NoChangesProvidedError

if TYPE_CHECKING:
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.users.ports import UserCommandGateway, UserQueryGateway
    from apps.storefront.domain.entities.user import User

logger = logging.getLogger(__name__)


class UpdateProfileInteractor:
    """사용자 프로필 업데이트 유스케이스."""

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._tx = transaction_manager

    async def execute(self, user_id: int, update: ProfileUpdate) -> "User":
        """사용자 프로필을 업데이트합니다.

        Raises:
            NoChangesProvidedError: 변경사항 없음
            UserNotFoundError: 사용자를 찾을 수 없음
            UserAlreadyExistsError: 사용자명 중복
        """
        if not update.has_changes():
            raise NoChangesProvidedError()

        user = await self._user_query.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.update_profile(
            first_name=update.first_name,
            last_name=update.last_name,
            username=update.username,
            gender=update.gender,
            locale=update.locale,
        )
        updated_user = await self._user_command.update(user)
        await self._tx.commit()

        logger.info("Profile updated", extra={"user_id": user_id})
        return updated_user
