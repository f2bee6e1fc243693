"""Domain Exceptions."""

from apps.storefront.domain.exceptions.auth import (
    InvalidCredentialsError,
    InvalidTokenSignatureError,
    PermissionDeniedError,
    SessionNotFoundError,
    TokenExpiredError,
    TokenRevokedError,
    UnauthenticatedError,
)
from apps.storefront.domain.exceptions.base import DomainError
from apps.storefront.domain.exceptions.catalog import (
    AddressNotFoundError,
    BrandNotFoundError,
    ProductImageNotFoundError,
    ProductNotFoundError,
    ProductTagNotFoundError,
    ResourceNotFoundError,
)
from apps.storefront.domain.exceptions.user import (
    InvalidActionTokenError,
    InvalidPasswordError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from apps.storefront.domain.exceptions.validation import (
    InvalidEmailError,
    NoChangesProvidedError,
    ValidationError,
)

__all__ = [
    "DomainError",
    # Auth
    "UnauthenticatedError",
    "InvalidTokenSignatureError",
    "TokenExpiredError",
    "TokenRevokedError",
    "SessionNotFoundError",
    "InvalidCredentialsError",
    "PermissionDeniedError",
    # User
    "UserNotFoundError",
    "UserAlreadyExistsError",
    "InvalidActionTokenError",
    "InvalidPasswordError",
    # Catalog
    "ResourceNotFoundError",
    "ProductNotFoundError",
    "BrandNotFoundError",
    "AddressNotFoundError",
    "ProductTagNotFoundError",
    "ProductImageNotFoundError",
    # Validation
    "ValidationError",
    "InvalidEmailError",
    "NoChangesProvidedError",
]
