from apps.storefront.application.storage.exceptions.upload import (
    FileTooLargeError,
    UnsupportedFileTypeError,
)

__all__ = ["FileTooLargeError", "UnsupportedFileTypeError"]
