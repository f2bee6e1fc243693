"""Email Verification Commands.

이메일 인증 메일 발송 / 인증 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): SendVerificationEmailInteractor, VerifyEmailInteractor
    - Ports(인프라): UserQueryGateway, UserCommandGateway, ActionTokenStore,
      MailSender, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.domain.enums.action_purpose import ActionPurpose
from apps.storefront.domain.exceptions.user import InvalidActionTokenError
from apps.storefront.domain.value_objects.email import Email

if TYPE_CHECKING:
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.users.ports import (
        ActionTokenStore,
        MailSender,
        UserCommandGateway,
        UserQueryGateway,
    )

logger = logging.getLogger(__name__)


class SendVerificationEmailInteractor:
    """이메일 인증 메일 발송.

    Workflow:
        1. 이메일 정규화/검증
        2. 사용자 조회 (없음/비활성/이미 인증됨 → 조용히 종료)
        3. 일회용 토큰 발급
        4. 메일 발송

    Note:
        가입 여부를 드러내지 않기 위해 2단계에서 종료해도 호출자는 성공을 응답합니다.
    """

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
            logger.info("Verification email skipped", extra={"reason": "unknown_or_inactive"})
            return
        if user.email_verified:
            logger.info(
                "Verification email skipped",
                extra={"reason": "already_verified", "user_id": user.id},
            )
            return

        token = await self._tokens.issue(ActionPurpose.EMAIL_VERIFICATION, user.id, self._ttl)
        await self._mail.send_email_verification(user, token)

        logger.info("Verification email sent", extra={"user_id": user.id})


class VerifyEmailInteractor:
    """토큰으로 이메일을 인증합니다. 토큰은 한 번만 쓸 수 있습니다."""

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        action_token_store: "ActionTokenStore",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._tokens = action_token_store
        self._tx = transaction_manager

    async def execute(self, token: str) -> None:
        """
        Raises:
            InvalidActionTokenError: 토큰이 비었거나 없거나 이미 사용됨, 사용자 비활성
        """
        if not token:
            raise InvalidActionTokenError()

        user_id = await self._tokens.consume(ActionPurpose.EMAIL_VERIFICATION, token)
        if user_id is None:
            raise InvalidActionTokenError()

        user = await self._user_query.get_by_id(user_id)
        if user is None or not user.can_login:
            raise InvalidActionTokenError()

        user.verify_email()
        await self._user_command.update(user)
        await self._tx.commit()

        logger.info("Email verified", extra={"user_id": user_id})
