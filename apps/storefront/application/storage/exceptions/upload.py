"""Upload Exceptions."""

from __future__ import annotations

from apps.storefront.application.common.exceptions.base import ApplicationError


class UnsupportedFileTypeError(ApplicationError):
    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__(f"Unsupported file type: {content_type}")


class FileTooLargeError(ApplicationError):
    def __init__(self, max_bytes: int) -> None:
        self.max_bytes = max_bytes
        super().__init__(f"File exceeds the {max_bytes} byte limit")
