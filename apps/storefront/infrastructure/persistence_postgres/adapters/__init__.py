"""SQLAlchemy adapters."""

from apps.storefront.infrastructure.persistence_postgres.adapters.address_gateway_sqla import (
    SqlaAddressGateway,
)
from apps.storefront.infrastructure.persistence_postgres.adapters.brand_gateway_sqla import (
    SqlaBrandGateway,
)
from apps.storefront.infrastructure.persistence_postgres.adapters.product_gateway_sqla import (
    SqlaProductGateway,
    SqlaProductImageGateway,
    SqlaProductReviewGateway,
    SqlaProductTagGateway,
)
from apps.storefront.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)
from apps.storefront.infrastructure.persistence_postgres.adapters.user_gateway_sqla import (
    SqlaUserCommandGateway,
    SqlaUserQueryGateway,
)

__all__ = [
    "SqlaAddressGateway",
    "SqlaBrandGateway",
    "SqlaProductGateway",
    "SqlaProductImageGateway",
    "SqlaProductReviewGateway",
    "SqlaProductTagGateway",
    "SqlaTransactionManager",
    "SqlaUserCommandGateway",
    "SqlaUserQueryGateway",
]
