from apps.storefront.application.users.queries.get_user import GetUserQuery

__all__ = ["GetUserQuery"]
