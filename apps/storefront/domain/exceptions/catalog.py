"""Catalog / Address Exceptions."""

from __future__ import annotations

from apps.storefront.domain.exceptions.base import DomainError


class ResourceNotFoundError(DomainError):
    """리소스를 찾을 수 없음."""

    def __init__(self, resource: str, resource_id: int | str) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found: {resource_id}")


class ProductNotFoundError(ResourceNotFoundError):
    def __init__(self, product_id: int) -> None:
        super().__init__("Product", product_id)


class BrandNotFoundError(ResourceNotFoundError):
    def __init__(self, brand_id: int) -> None:
        super().__init__("Brand", brand_id)


class AddressNotFoundError(ResourceNotFoundError):
    def __init__(self, address_id: int) -> None:
        super().__init__("Address", address_id)


class ProductTagNotFoundError(ResourceNotFoundError):
    def __init__(self, tag_id: int) -> None:
        super().__init__("ProductTag", tag_id)


class ProductImageNotFoundError(ResourceNotFoundError):
    def __init__(self, image_id: int) -> None:
        super().__init__("ProductImage", image_id)
