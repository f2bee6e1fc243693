"""Users DTOs."""

from apps.storefront.application.users.dto.user import (
    AuthResult,
    ChangePasswordRequest,
    LoginRequest,
    ProfileUpdate,
    RegisterUserRequest,
)

__all__ = [
    "AuthResult",
    "ChangePasswordRequest",
    "LoginRequest",
    "ProfileUpdate",
    "RegisterUserRequest",
]
