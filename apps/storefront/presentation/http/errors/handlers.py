"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 본문: {"detail": <메시지>, "code": <코드>}

인증 실패(서명/만료/폐기/세션 없음)는 어떤 검사가 실패했는지 드러내지 않도록
모두 같은 401 응답으로 변환합니다.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps.storefront.application.common.exceptions import (
    ApplicationError,
    DataMapperError,
    FileStorageError,
    SessionPersistenceError,
)
from apps.storefront.application.common.messages import (
    Message,
    MessageCatalog,
    parse_accept_language,
)
from apps.storefront.application.storage.exceptions import (
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from apps.storefront.application.token.exceptions import TokenSigningError
from apps.storefront.domain.exceptions.auth import (
    InvalidCredentialsError,
    PermissionDeniedError,
    UnauthenticatedError,
)
from apps.storefront.domain.exceptions.base import DomainError
from apps.storefront.domain.exceptions.catalog import ResourceNotFoundError
from apps.storefront.domain.exceptions.user import (
    InvalidActionTokenError,
    InvalidPasswordError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from apps.storefront.domain.exceptions.validation import NoChangesProvidedError, ValidationError
from apps.storefront.presentation.http.errors import messages as msg

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI, catalog: MessageCatalog) -> None:
    """예외 핸들러 등록.

    Args:
        app: FastAPI 앱
        catalog: 읽기 전용 메시지 카탈로그 (시작 시 한 번 생성)
    """

    def respond(request: Request, status_code: int, code: str, message: Message) -> JSONResponse:
        locale = parse_accept_language(request.headers.get("accept-language"))
        return JSONResponse(
            status_code=status_code,
            content={"detail": catalog.render(message, locale), "code": code},
        )

    @app.exception_handler(UnauthenticatedError)
    async def unauthenticated_handler(request: Request, exc: UnauthenticatedError):
        logger.info(
            "Unauthenticated request",
            extra={"path": request.url.path, "reason": type(exc).__name__},
        )
        return respond(request, 401, "UNAUTHORIZED", msg.MSG_UNAUTHORIZED)

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError):
        return respond(request, 401, "INVALID_CREDENTIALS", msg.MSG_INVALID_CREDENTIALS)

    @app.exception_handler(PermissionDeniedError)
    async def permission_denied_handler(request: Request, exc: PermissionDeniedError):
        return respond(request, 403, "FORBIDDEN", msg.MSG_FORBIDDEN)

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return respond(request, 404, "USER_NOT_FOUND", Message("api.user.not_found", exc.message))

    @app.exception_handler(ResourceNotFoundError)
    async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError):
        return respond(request, 404, "NOT_FOUND", Message("api.not_found", exc.message))

    @app.exception_handler(UserAlreadyExistsError)
    async def user_exists_handler(request: Request, exc: UserAlreadyExistsError):
        return respond(request, 409, "USER_ALREADY_EXISTS", msg.MSG_USER_EXISTS)

    @app.exception_handler(InvalidActionTokenError)
    async def invalid_action_token_handler(request: Request, exc: InvalidActionTokenError):
        return respond(request, 400, "INVALID_TOKEN", msg.MSG_INVALID_ACTION_TOKEN)

    @app.exception_handler(InvalidPasswordError)
    async def invalid_password_handler(request: Request, exc: InvalidPasswordError):
        return respond(request, 400, "INVALID_PASSWORD", msg.MSG_INVALID_PASSWORD)

    @app.exception_handler(NoChangesProvidedError)
    async def no_changes_handler(request: Request, exc: NoChangesProvidedError):
        return respond(request, 422, "NO_CHANGES_PROVIDED", msg.MSG_NO_CHANGES)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return respond(request, 422, "VALIDATION_ERROR", Message("api.validation", exc.message))

    @app.exception_handler(TokenSigningError)
    async def token_signing_handler(request: Request, exc: TokenSigningError):
        logger.error("Token signing failed", extra={"path": request.url.path})
        return respond(request, 500, "TOKEN_SIGNING_FAILED", msg.MSG_SIGNING)

    @app.exception_handler(SessionPersistenceError)
    async def session_store_handler(request: Request, exc: SessionPersistenceError):
        return respond(request, 503, "SESSION_STORE_UNAVAILABLE", msg.MSG_SESSION_STORE)

    @app.exception_handler(DataMapperError)
    async def data_mapper_handler(request: Request, exc: DataMapperError):
        return respond(request, 503, "DATABASE_UNAVAILABLE", msg.MSG_DATABASE)

    @app.exception_handler(FileStorageError)
    async def file_storage_handler(request: Request, exc: FileStorageError):
        return respond(request, 500, "FILE_STORAGE_ERROR", msg.MSG_FILE_STORAGE)

    @app.exception_handler(UnsupportedFileTypeError)
    async def unsupported_file_handler(request: Request, exc: UnsupportedFileTypeError):
        return respond(request, 415, "UNSUPPORTED_FILE_TYPE", msg.MSG_UNSUPPORTED_FILE)

    @app.exception_handler(FileTooLargeError)
    async def file_too_large_handler(request: Request, exc: FileTooLargeError):
        return respond(request, 413, "FILE_TOO_LARGE", msg.MSG_FILE_TOO_LARGE)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return respond(request, 400, "DOMAIN_ERROR", Message("api.domain_error", exc.message))

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return respond(
            request, 400, "APPLICATION_ERROR", Message("api.application_error", exc.message)
        )
