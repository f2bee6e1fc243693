"""Login Command.

이메일/비밀번호 로그인 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.users.dto import AuthResult, LoginRequest
from apps.storefront.domain.exceptions.auth import InvalidCredentialsError
from apps.storefront.domain.value_objects.email import normalize_email

if TYPE_CHECKING:
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.token.services import TokenService
    from apps.storefront.application.users.ports import (
        PasswordHasher,
        UserCommandGateway,
        UserQueryGateway,
    )

logger = logging.getLogger(__name__)


class LoginInteractor:
    """로그인 Interactor (지휘자).

    Workflow:
        1. 이메일로 사용자 조회 (없음/비활성 → InvalidCredentialsError)
        2. 비밀번호 검증 (실패 시 failed_attempts 증가 후 커밋)
        3. 마지막 로그인 시각 기록 + 커밋
        4. 토큰 발급 및 세션 저장
    """

    def __init__(
        self,
        token_service: "TokenService",
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        password_hasher: "PasswordHasher",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._token_service = token_service
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._hasher = password_hasher
        self._tx = transaction_manager

    async def execute(self, request: LoginRequest) -> AuthResult:
        # 1. 사용자 조회
        user = await self._user_query.get_by_email(normalize_email(request.email))
        if user is None or not user.can_login:
            raise InvalidCredentialsError()

        # 2. 비밀번호 검증
        if not self._hasher.verify(request.password, user.password):
            user.record_failed_login()
            await self._user_command.update(user)
            await self._tx.commit()
            logger.warning(
                "Login failed",
                extra={"user_id": user.id, "failed_attempts": user.failed_attempts},
            )
            raise InvalidCredentialsError()

        # 3. 로그인 기록
        user.record_login()
        user = await self._user_command.update(user)
        await self._tx.commit()

        # 4. 토큰 발급
        tokens = await self._token_service.issue_and_save(user.id)
        logger.info("User logged in", extra={"user_id": user.id})
        return AuthResult(user=user, tokens=tokens)
