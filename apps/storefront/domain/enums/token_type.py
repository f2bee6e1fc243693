"""Token Type Enum."""

from enum import Enum


class TokenType(str, Enum):
    """토큰 종류. 종류마다 서명 시크릿이 다릅니다."""

    ACCESS = "access"
    REFRESH = "refresh"
