"""ChangePassword Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.users.dto import ChangePasswordRequest
from apps.storefront.domain.exceptions.auth import InvalidCredentialsError
from apps.storefront.domain.exceptions.user import InvalidPasswordError, UserNotFoundError

if TYPE_CHECKING:
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.users.ports import (
        PasswordHasher,
        UserCommandGateway,
        UserQueryGateway,
    )

logger = logging.getLogger(__name__)


class ChangePasswordInteractor:
    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        password_hasher: "PasswordHasher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._hasher = password_hasher
        self._tx = transaction_manager

    async def execute(self, user_id: int, request: ChangePasswordRequest) -> None:
        """비밀번호를 변경합니다.

        Raises:
            InvalidPasswordError: 새 비밀번호가 비었거나 확인 값과 다름
            InvalidCredentialsError: 기존 비밀번호 불일치
            UserNotFoundError: 사용자를 찾을 수 없음
        """
        if not request.is_consistent():
            raise InvalidPasswordError()

        user = await self._user_query.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if not self._hasher.verify(request.old_password, user.password):
            raise InvalidCredentialsError()

        user.change_password(self._hasher.hash(request.new_password))
        await self._user_command.update(user)
        await self._tx.commit()

        logger.info("Password changed", extra={"user_id": user_id})
