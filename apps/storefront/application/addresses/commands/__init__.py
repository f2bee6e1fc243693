from apps.storefront.application.addresses.commands.manage_address import (
    CreateAddressInteractor,
    DeleteAddressInteractor,
    UpdateAddressInteractor,
)

__all__ = [
    "CreateAddressInteractor",
    "DeleteAddressInteractor",
    "UpdateAddressInteractor",
]
