"""Email Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.storefront.domain.exceptions.validation import InvalidEmailError

# RFC 5322 간소화 버전
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$")
EMAIL_MAX_LENGTH = 320


def normalize_email(value: str) -> str:
    """앞뒤 공백 제거 후 소문자로 변환."""
    return value.strip().lower()


@dataclass(frozen=True, slots=True)
class Email:
    """이메일 Value Object.

    생성 시 정규화 및 검증을 수행하므로 항상 유효한 이메일만 존재합니다.
    """

    value: str

    @classmethod
    def parse(cls, raw: str | None) -> "Email":
        return cls(normalize_email(raw or ""))

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidEmailError("Email cannot be empty")
        if len(self.value) > EMAIL_MAX_LENGTH:
            raise InvalidEmailError("Email too long (max 320 characters)")
        if not EMAIL_PATTERN.match(self.value):
            raise InvalidEmailError()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        local, domain = self.value.split("@")
        return f"Email({local[:2]}***@{domain})"
