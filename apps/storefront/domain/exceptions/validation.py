"""Validation Exceptions."""

from __future__ import annotations

from apps.storefront.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """값 검증 실패."""

    def __init__(self, message: str = "Validation failed", field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InvalidEmailError(ValidationError):
    def __init__(self, message: str = "invalid email provided") -> None:
        super().__init__(message, field="email")


class NoChangesProvidedError(ValidationError):
    def __init__(self) -> None:
        super().__init__("No changes provided")
