from apps.storefront.application.storage.ports.file_storage import FileStorage, StoredFile

__all__ = ["FileStorage", "StoredFile"]
