"""Auth Controller.

회원가입, 로그인, 로그아웃, 토큰 갱신, 이메일 인증, 비밀번호 재설정 엔드포인트입니다.
토큰 발급/세션 저장이 모두 성공한 뒤에만 쿠키를 설정합니다.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Response, status

from apps.storefront.application.token.commands import LogoutInteractor, RefreshTokensInteractor
from apps.storefront.application.token.dto import LogoutRequest, RefreshTokensRequest
from apps.storefront.application.users.commands import (
    LoginInteractor,
    RegisterUserInteractor,
    ResetPasswordInteractor,
    SendPasswordResetInteractor,
    SendVerificationEmailInteractor,
    VerifyEmailInteractor,
)
from apps.storefront.application.users.dto import LoginRequest, RegisterUserRequest
from apps.storefront.domain.exceptions.auth import UnauthenticatedError
from apps.storefront.presentation.http.auth.cookie_params import (
    clear_auth_cookies,
    set_auth_cookies,
)
from apps.storefront.presentation.http.auth.dependencies import (
    get_access_token,
    get_refresh_token_from_transport,
)
from apps.storefront.presentation.http.schemas.auth import (
    ActionTokenRequestSchema,
    AuthResponse,
    EmailRequestSchema,
    LoginRequestSchema,
    LogoutResponse,
    RefreshRequestSchema,
    RegisterRequestSchema,
    ResetPasswordRequestSchema,
    TokenResponse,
)
from apps.storefront.presentation.http.schemas.common import MessageResponse
from apps.storefront.presentation.http.schemas.users import UserResponse
from apps.storefront.setup.dependencies import (
    get_login_interactor,
    get_logout_interactor,
    get_refresh_tokens_interactor,
    get_register_user_interactor,
    get_reset_password_interactor,
    get_send_password_reset_interactor,
    get_send_verification_email_interactor,
    get_verify_email_interactor,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users")


def _token_response(pair) -> TokenResponse:
    return TokenResponse(
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
        access_expires_at=pair.access_expires_at,
        refresh_expires_at=pair.refresh_expires_at,
    )


@router.post(
    "",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="회원가입",
)
async def register(
    body: RegisterRequestSchema,
    response: Response,
    interactor: RegisterUserInteractor = Depends(get_register_user_interactor),
) -> AuthResponse:
    result = await interactor.execute(RegisterUserRequest(**body.model_dump()))
    set_auth_cookies(response, result.tokens)
    return AuthResponse(
        user=UserResponse.model_validate(result.user),
        tokens=_token_response(result.tokens),
    )


@router.post("/login", response_model=AuthResponse, summary="로그인")
async def login(
    body: LoginRequestSchema,
    response: Response,
    interactor: LoginInteractor = Depends(get_login_interactor),
) -> AuthResponse:
    result = await interactor.execute(LoginRequest(email=body.email, password=body.password))
    set_auth_cookies(response, result.tokens)
    return AuthResponse(
        user=UserResponse.model_validate(result.user),
        tokens=_token_response(result.tokens),
    )


@router.post("/logout", response_model=LogoutResponse, summary="로그아웃")
async def logout(
    response: Response,
    access_token: Optional[str] = Depends(get_access_token),
    refresh_token: Optional[str] = Depends(get_refresh_token_from_transport),
    interactor: LogoutInteractor = Depends(get_logout_interactor),
) -> LogoutResponse:
    """로그아웃을 처리합니다.

    세션이 이미 없거나 토큰이 유효하지 않아도 항상 성공으로 응답합니다.
    """
    clear_auth_cookies(response)
    await interactor.execute(
        LogoutRequest(access_token=access_token, refresh_token=refresh_token)
    )
    return LogoutResponse()


@router.post("/token/refresh", response_model=TokenResponse, summary="토큰 갱신")
async def refresh(
    response: Response,
    body: Optional[RefreshRequestSchema] = Body(None),
    transport_token: Optional[str] = Depends(get_refresh_token_from_transport),
    interactor: RefreshTokensInteractor = Depends(get_refresh_tokens_interactor),
) -> TokenResponse:
    """리프레시 토큰으로 새 토큰 쌍을 발급합니다.

    리프레시 토큰은 JSON 본문 → X-Refresh-Token 헤더 → 쿠키 순으로 찾습니다.
    """
    refresh_token = (body.refresh_token if body else None) or transport_token
    if not refresh_token:
        raise UnauthenticatedError("Refresh token is required")

    pair = await interactor.execute(RefreshTokensRequest(refresh_token=refresh_token))
    set_auth_cookies(response, pair)
    return _token_response(pair)


@router.post("/email/verify", response_model=MessageResponse, summary="이메일 인증")
async def verify_email(
    body: ActionTokenRequestSchema,
    interactor: VerifyEmailInteractor = Depends(get_verify_email_interactor),
) -> MessageResponse:
    await interactor.execute(body.token)
    return MessageResponse(message="email verified")


@router.post("/email/verify/send", response_model=MessageResponse, summary="인증 메일 발송")
async def send_verification_email(
    body: EmailRequestSchema,
    interactor: SendVerificationEmailInteractor = Depends(
        get_send_verification_email_interactor
    ),
) -> MessageResponse:
    """가입 여부와 관계없이 같은 응답을 돌려줍니다."""
    await interactor.execute(body.email)
    return MessageResponse()


@router.post("/password/reset", response_model=MessageResponse, summary="비밀번호 재설정")
async def reset_password(
    body: ResetPasswordRequestSchema,
    interactor: ResetPasswordInteractor = Depends(get_reset_password_interactor),
) -> MessageResponse:
    await interactor.execute(body.token, body.password)
    return MessageResponse(message="password updated")


@router.post("/password/reset/send", response_model=MessageResponse, summary="재설정 메일 발송")
async def send_password_reset(
    body: EmailRequestSchema,
    interactor: SendPasswordResetInteractor = Depends(get_send_password_reset_interactor),
) -> MessageResponse:
    """가입 여부와 관계없이 같은 응답을 돌려줍니다."""
    await interactor.execute(body.email)
    return MessageResponse()
