"""Application Exceptions.

공통 예외만 포함합니다. 토큰 관련 예외는 apps.storefront.application.token.exceptions에 있습니다.
"""

from apps.storefront.application.common.exceptions.base import ApplicationError
from apps.storefront.application.common.exceptions.gateway import (
    DataMapperError,
    FileStorageError,
    GatewayError,
    SessionPersistenceError,
)

__all__ = [
    "ApplicationError",
    "GatewayError",
    "DataMapperError",
    "SessionPersistenceError",
    "FileStorageError",
]
