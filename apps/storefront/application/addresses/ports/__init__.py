from apps.storefront.application.addresses.ports.address_gateway import AddressGateway

__all__ = ["AddressGateway"]
