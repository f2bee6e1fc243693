"""Test Factories.

테스트용 객체 생성 팩토리.
"""

from __future__ import annotations

from apps.storefront.domain.entities.address import Address
from apps.storefront.domain.entities.brand import Brand
from apps.storefront.domain.entities.product import Product
from apps.storefront.domain.entities.user import User
from apps.storefront.domain.enums.user_role import UserRole


def create_user(
    *,
    user_id: int = 42,
    email: str = "jane@example.com",
    username: str = "jane",
    password: str = "hashed-password",
    role: UserRole = UserRole.USER,
    active: bool = True,
) -> User:
    """테스트용 User 생성."""
    return User(
        id=user_id,
        first_name="Jane",
        last_name="Doe",
        username=username,
        email=email,
        password=password,
        role=role.value,
        active=active,
    )


def create_address(*, address_id: int = 7, user_id: int = 42) -> Address:
    return Address(
        id=address_id,
        user_id=user_id,
        line_1="Main Street 1",
        city="Belgrade",
        country="Serbia",
        zip="11000",
    )


def create_brand(*, brand_id: int = 3, name: str = "Acme") -> Brand:
    return Brand(id=brand_id, name=name, slug=name.lower(), email="info@acme.test")


def create_product(*, product_id: int = 11, brand_id: int = 3, stock: int = 5) -> Product:
    return Product(
        id=product_id,
        brand_id=brand_id,
        name="Runner",
        slug="runner",
        price=12_900,
        stock=stock,
        sku="RUN-001",
        properties={"color": "red"},
    )
