"""Password Reset Commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.domain.enums.action_purpose import ActionPurpose
from apps.storefront.domain.exceptions.user import InvalidActionTokenError, InvalidPasswordError
from apps.storefront.domain.value_objects.email import Email

if TYPE_CHECKING:
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.users.ports import (
        ActionTokenStore,
        MailSender,
        PasswordHasher,
        UserCommandGateway,
        UserQueryGateway,
    )

logger = logging.getLogger(__name__)


class SendPasswordResetInteractor:
    """비밀번호 재설정 메일 발송. 가입되지 않은 이메일도 성공으로 끝납니다."""

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        action_token_store: "ActionTokenStore",
        mail_sender: "MailSender",
        token_ttl_seconds: int,
    ) -> None:
        self._user_query = user_query_gateway
        self._tokens = action_token_store
        self._mail = mail_sender
        self._ttl = token_ttl_seconds

    async def execute(self, raw_email: str) -> None:
        email = Email.parse(raw_email)

        user = await self._user_query.get_by_email(str(email))
        if user is None or not user.can_login:
            logger.info("Password reset email skipped", extra={"reason": "unknown_or_inactive"})
            return

        token = await self._tokens.issue(ActionPurpose.PASSWORD_RESET, user.id, self._ttl)
        await self._mail.send_password_reset(user, token)

        logger.info("Password reset email sent", extra={"user_id": user.id})


class ResetPasswordInteractor:
    """토큰으로 비밀번호를 재설정합니다.

    Workflow:
        1. 새 비밀번호 확인 (비었으면 토큰을 소모하지 않고 실패)
        2. 토큰 소모 (일회용)
        3. 비밀번호 해시 저장 + 커밋
    """

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        action_token_store: "ActionTokenStore",
        password_hasher: "PasswordHasher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._tokens = action_token_store
        self._hasher = password_hasher
        self._tx = transaction_manager

    async def execute(self, token: str, new_password: str) -> None:
        if not new_password:
            raise InvalidPasswordError()
        if not token:
            raise InvalidActionTokenError()

        user_id = await self._tokens.consume(ActionPurpose.PASSWORD_RESET, token)
        if user_id is None:
            raise InvalidActionTokenError()

        user = await self._user_query.get_by_id(user_id)
        if user is None or not user.can_login:
            raise InvalidActionTokenError()

        user.change_password(self._hasher.hash(new_password))
        await self._user_command.update(user)
        await self._tx.commit()

        logger.info("Password reset", extra={"user_id": user_id})
