from apps.storefront.application.token.queries.validate import ValidateTokenQueryService

__all__ = ["ValidateTokenQueryService"]
