"""RegisterUser Command.

회원가입 Use Case입니다.

Architecture:
    - UseCase(지휘자): RegisterUserInteractor
    - Services(연주자): TokenService
    - Ports(인프라): UserQueryGateway, UserCommandGateway, PasswordHasher, TransactionManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.storefront.application.users.dto import AuthResult, RegisterUserRequest
from apps.storefront.domain.entities.user import User
from apps.storefront.domain.exceptions.user import InvalidPasswordError, UserAlreadyExistsError
from apps.storefront.domain.value_objects.email import Email

if TYPE_CHECKING:
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.token.services import TokenService
    from apps.storefront.application.users.ports import (
        PasswordHasher,
        UserCommandGateway,
        UserQueryGateway,
    )

logger = logging.getLogger(__name__)


class RegisterUserInteractor:
    """회원가입 Interactor (지휘자).

    Workflow:
        1. 이메일 정규화/검증, 중복 확인
        2. 비밀번호 해시 후 사용자 저장 + 커밋
        3. 토큰 발급 및 세션 저장 (TokenService)
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

    async def execute(self, request: RegisterUserRequest) -> AuthResult:
        """
        Raises:
            InvalidEmailError: 이메일 형식 오류
            InvalidPasswordError: 빈 비밀번호
            UserAlreadyExistsError: 중복 사용자
            TokenSigningError, SessionPersistenceError: 토큰 발급 실패
        """
        # 1. 이메일 검증 및 중복 확인
        email = Email.parse(request.email)
        if not request.password:
            raise InvalidPasswordError()
        if await self._user_query.get_by_email(email.value) is not None:
            raise UserAlreadyExistsError()

        # 2. 사용자 저장
        user = User(
            first_name=request.first_name,
            last_name=request.last_name,
            username=request.username,
            email=email.value,
            password=self._hasher.hash(request.password),
            gender=request.gender,
            locale=request.locale,
        )
        user = await self._user_command.add(user)
        await self._tx.commit()

        logger.info("User registered", extra={"user_id": user.id})

        # 3. 토큰 발급
        tokens = await self._token_service.issue_and_save(user.id)
        return AuthResult(user=user, tokens=tokens)
