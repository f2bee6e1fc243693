from apps.storefront.application.addresses.queries.get_address import (
    GetAddressQuery,
    ListAddressesQuery,
)

__all__ = ["GetAddressQuery", "ListAddressesQuery"]
