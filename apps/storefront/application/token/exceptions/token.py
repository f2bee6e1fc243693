"""Token Exceptions."""

from apps.storefront.application.common.exceptions.base import ApplicationError


class TokenSigningError(ApplicationError):
    """토큰 서명 실패 (키/알고리즘 설정 오류). 치명적 오류로 취급합니다."""

    def __init__(self, reason: str = "could not sign token") -> None:
        super().__init__(reason)
