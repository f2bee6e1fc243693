"""Gateway Exceptions.

인프라 어댑터가 외부 저장소 오류를 감싸서 올리는 예외입니다.
"""

from __future__ import annotations

from apps.storefront.application.common.exceptions.base import ApplicationError


class GatewayError(ApplicationError):
    """외부 저장소 호출 실패."""


class DataMapperError(GatewayError):
    """RDB 읽기/쓰기 실패."""

    def __init__(self, message: str = "could not access the database") -> None:
        super().__init__(message)


class SessionPersistenceError(GatewayError):
    """세션 저장소(Redis) 읽기/쓰기 실패. 일시적일 수 있으며 재시도는 호출자 몫입니다."""

    def __init__(self, message: str = "could not access the session store") -> None:
        super().__init__(message)


class FileStorageError(GatewayError):
    """파일 저장/삭제 실패."""

    def __init__(self, message: str = "could not store the file") -> None:
        super().__init__(message)
