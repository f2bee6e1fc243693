"""Token DTOs."""

from apps.storefront.application.token.dto.token import (
    AuthSession,
    LogoutRequest,
    LogoutResult,
    RefreshTokensRequest,
)

__all__ = [
    "AuthSession",
    "LogoutRequest",
    "LogoutResult",
    "RefreshTokensRequest",
]
