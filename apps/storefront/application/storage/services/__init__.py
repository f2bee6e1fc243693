from apps.storefront.application.storage.services.cleanup import discard_stored_files

__all__ = ["discard_stored_files"]
