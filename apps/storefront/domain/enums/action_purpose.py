"""Action Purpose Enum."""

from enum import Enum


class ActionPurpose(str, Enum):
    """일회용 계정 토큰의 용도. 용도가 다르면 같은 토큰이라도 사용할 수 없습니다."""

    EMAIL_VERIFICATION = "email_verification"
    PASSWORD_RESET = "password_reset"
