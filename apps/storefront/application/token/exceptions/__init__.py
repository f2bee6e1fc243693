from apps.storefront.application.token.exceptions.token import TokenSigningError

__all__ = ["TokenSigningError"]
