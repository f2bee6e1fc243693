from apps.storefront.application.token.services.token_service import TokenService

__all__ = ["TokenService"]
