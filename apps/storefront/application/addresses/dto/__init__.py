from apps.storefront.application.addresses.dto.address import AddressInput, AddressPatch

__all__ = ["AddressInput", "AddressPatch"]
