"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from apps.storefront.setup.config.settings import Settings, get_settings

if TYPE_CHECKING:
    import redis.asyncio as aioredis
    from sqlalchemy.ext.asyncio import AsyncSession


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from apps.storefront.infrastructure.persistence_postgres.session import get_async_session

    async for session in get_async_session():
        yield session


def get_session_redis() -> "aioredis.Redis":
    """세션 저장용 Redis 클라이언트 제공자."""
    from apps.storefront.infrastructure.persistence_redis.client import get_session_redis

    return get_session_redis()


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


async def get_user_query_gateway(session: "AsyncSession" = Depends(get_db_session)):
    """UserQueryGateway 제공자."""
    from apps.storefront.infrastructure.persistence_postgres.adapters import SqlaUserQueryGateway

    return SqlaUserQueryGateway(session)


async def get_user_command_gateway(session: "AsyncSession" = Depends(get_db_session)):
    """UserCommandGateway 제공자."""
    from apps.storefront.infrastructure.persistence_postgres.adapters import (
        SqlaUserCommandGateway,
    )

    return SqlaUserCommandGateway(session)


async def get_address_gateway(session: "AsyncSession" = Depends(get_db_session)):
    from apps.storefront.infrastructure.persistence_postgres.adapters import SqlaAddressGateway

    return SqlaAddressGateway(session)


async def get_brand_gateway(session: "AsyncSession" = Depends(get_db_session)):
    from apps.storefront.infrastructure.persistence_postgres.adapters import SqlaBrandGateway

    return SqlaBrandGateway(session)


async def get_product_gateway(session: "AsyncSession" = Depends(get_db_session)):
    from apps.storefront.infrastructure.persistence_postgres.adapters import SqlaProductGateway

    return SqlaProductGateway(session)


async def get_product_tag_gateway(session: "AsyncSession" = Depends(get_db_session)):
    from apps.storefront.infrastructure.persistence_postgres.adapters import SqlaProductTagGateway

    return SqlaProductTagGateway(session)


async def get_product_image_gateway(session: "AsyncSession" = Depends(get_db_session)):
    from apps.storefront.infrastructure.persistence_postgres.adapters import (
        SqlaProductImageGateway,
    )

    return SqlaProductImageGateway(session)


async def get_product_review_gateway(session: "AsyncSession" = Depends(get_db_session)):
    from apps.storefront.infrastructure.persistence_postgres.adapters import (
        SqlaProductReviewGateway,
    )

    return SqlaProductReviewGateway(session)


async def get_transaction_manager(session: "AsyncSession" = Depends(get_db_session)):
    """TransactionManager 제공자."""
    from apps.storefront.infrastructure.persistence_postgres.adapters import (
        SqlaTransactionManager,
    )

    return SqlaTransactionManager(session)


def get_session_store(redis: "aioredis.Redis" = Depends(get_session_redis)):
    """SessionStore 제공자."""
    from apps.storefront.infrastructure.persistence_redis import RedisSessionStore

    return RedisSessionStore(redis)


def get_action_token_store(redis: "aioredis.Redis" = Depends(get_session_redis)):
    """ActionTokenStore 제공자 (세션과 같은 Redis)."""
    from apps.storefront.infrastructure.persistence_redis import RedisActionTokenStore

    return RedisActionTokenStore(redis)


def get_mail_sender(settings: Settings = Depends(get_settings)):
    """MailSender 제공자."""
    from apps.storefront.infrastructure.mail import LoggingMailSender

    return LoggingMailSender(settings.frontend_base_url)


def get_file_storage(settings: Settings = Depends(get_settings)):
    """FileStorage 제공자 (로컬 디렉터리)."""
    from apps.storefront.infrastructure.storage import LocalFileStorage

    return LocalFileStorage(
        root_dir=settings.upload_dir,
        base_url=settings.upload_base_url,
        max_bytes=settings.upload_max_bytes,
    )


# ============================================================
# Service Dependencies
# ============================================================


def get_token_issuer(settings: Settings = Depends(get_settings)):
    """TokenIssuer 제공자."""
    from apps.storefront.infrastructure.security import JwtTokenService

    return JwtTokenService(
        access_secret=settings.jwt_access_secret,
        refresh_secret=settings.jwt_refresh_secret,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        access_token_expire_minutes=settings.access_token_exp_minutes,
        refresh_token_expire_minutes=settings.refresh_token_exp_minutes,
    )


def get_password_hasher():
    from apps.storefront.infrastructure.security import BcryptPasswordHasher

    return BcryptPasswordHasher()


def get_token_service(
    issuer=Depends(get_token_issuer),
    session_store=Depends(get_session_store),
):
    """TokenService 제공자."""
    from apps.storefront.application.token.services import TokenService

    return TokenService(issuer=issuer, session_store=session_store)


# ============================================================
# Use Case Dependencies - Token
# ============================================================


def get_validate_token_service(token_service=Depends(get_token_service)):
    """ValidateTokenQueryService 제공자."""
    from apps.storefront.application.token.queries import ValidateTokenQueryService

    return ValidateTokenQueryService(token_service=token_service)


def get_logout_interactor(token_service=Depends(get_token_service)):
    """LogoutInteractor 제공자."""
    from apps.storefront.application.token.commands import LogoutInteractor

    return LogoutInteractor(token_service=token_service)


async def get_refresh_tokens_interactor(
    token_service=Depends(get_token_service),
    user_query_gateway=Depends(get_user_query_gateway),
):
    """RefreshTokensInteractor 제공자."""
    from apps.storefront.application.token.commands import RefreshTokensInteractor

    return RefreshTokensInteractor(
        token_service=token_service,
        user_query_gateway=user_query_gateway,
    )


# ============================================================
# Use Case Dependencies - Users
# ============================================================


async def get_register_user_interactor(
    token_service=Depends(get_token_service),
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    password_hasher=Depends(get_password_hasher),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import RegisterUserInteractor

    return RegisterUserInteractor(
        token_service=token_service,
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        password_hasher=password_hasher,
        transaction_manager=transaction_manager,
    )


async def get_login_interactor(
    token_service=Depends(get_token_service),
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    password_hasher=Depends(get_password_hasher),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import LoginInteractor

    return LoginInteractor(
        token_service=token_service,
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        password_hasher=password_hasher,
        transaction_manager=transaction_manager,
    )


async def get_get_user_query(user_query_gateway=Depends(get_user_query_gateway)):
    from apps.storefront.application.users.queries import GetUserQuery

    return GetUserQuery(user_query_gateway=user_query_gateway)


async def get_update_profile_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import UpdateProfileInteractor

    return UpdateProfileInteractor(
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        transaction_manager=transaction_manager,
    )


async def get_change_password_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    password_hasher=Depends(get_password_hasher),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import ChangePasswordInteractor

    return ChangePasswordInteractor(
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        password_hasher=password_hasher,
        transaction_manager=transaction_manager,
    )


async def get_delete_user_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import DeleteUserInteractor

    return DeleteUserInteractor(
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        transaction_manager=transaction_manager,
    )


async def get_upload_avatar_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    file_storage=Depends(get_file_storage),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import UploadAvatarInteractor

    return UploadAvatarInteractor(
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        file_storage=file_storage,
        transaction_manager=transaction_manager,
    )


async def get_remove_avatar_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    file_storage=Depends(get_file_storage),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import RemoveAvatarInteractor

    return RemoveAvatarInteractor(
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        file_storage=file_storage,
        transaction_manager=transaction_manager,
    )


async def get_send_verification_email_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    action_token_store=Depends(get_action_token_store),
    mail_sender=Depends(get_mail_sender),
    settings: Settings = Depends(get_settings),
):
    from apps.storefront.application.users.commands import SendVerificationEmailInteractor

    return SendVerificationEmailInteractor(
        user_query_gateway=user_query_gateway,
        action_token_store=action_token_store,
        mail_sender=mail_sender,
        token_ttl_seconds=settings.email_verification_ttl_minutes * 60,
    )


async def get_verify_email_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    action_token_store=Depends(get_action_token_store),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import VerifyEmailInteractor

    return VerifyEmailInteractor(
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        action_token_store=action_token_store,
        transaction_manager=transaction_manager,
    )


async def get_send_password_reset_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    action_token_store=Depends(get_action_token_store),
    mail_sender=Depends(get_mail_sender),
    settings: Settings = Depends(get_settings),
):
    from apps.storefront.application.users.commands import SendPasswordResetInteractor

    return SendPasswordResetInteractor(
        user_query_gateway=user_query_gateway,
        action_token_store=action_token_store,
        mail_sender=mail_sender,
        token_ttl_seconds=settings.password_reset_ttl_minutes * 60,
    )


async def get_reset_password_interactor(
    user_query_gateway=Depends(get_user_query_gateway),
    user_command_gateway=Depends(get_user_command_gateway),
    action_token_store=Depends(get_action_token_store),
    password_hasher=Depends(get_password_hasher),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.users.commands import ResetPasswordInteractor

    return ResetPasswordInteractor(
        user_query_gateway=user_query_gateway,
        user_command_gateway=user_command_gateway,
        action_token_store=action_token_store,
        password_hasher=password_hasher,
        transaction_manager=transaction_manager,
    )


# ============================================================
# Use Case Dependencies - Addresses
# ============================================================


async def get_create_address_interactor(
    address_gateway=Depends(get_address_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.addresses.commands import CreateAddressInteractor

    return CreateAddressInteractor(address_gateway, transaction_manager)


async def get_update_address_interactor(
    address_gateway=Depends(get_address_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.addresses.commands import UpdateAddressInteractor

    return UpdateAddressInteractor(address_gateway, transaction_manager)


async def get_delete_address_interactor(
    address_gateway=Depends(get_address_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.addresses.commands import DeleteAddressInteractor

    return DeleteAddressInteractor(address_gateway, transaction_manager)


async def get_get_address_query(address_gateway=Depends(get_address_gateway)):
    from apps.storefront.application.addresses.queries import GetAddressQuery

    return GetAddressQuery(address_gateway)


async def get_list_addresses_query(address_gateway=Depends(get_address_gateway)):
    from apps.storefront.application.addresses.queries import ListAddressesQuery

    return ListAddressesQuery(address_gateway)


# ============================================================
# Use Case Dependencies - Catalog
# ============================================================


async def get_create_product_interactor(
    product_gateway=Depends(get_product_gateway),
    tag_gateway=Depends(get_product_tag_gateway),
    image_gateway=Depends(get_product_image_gateway),
    brand_gateway=Depends(get_brand_gateway),
    file_storage=Depends(get_file_storage),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import CreateProductInteractor

    return CreateProductInteractor(
        product_gateway=product_gateway,
        tag_gateway=tag_gateway,
        image_gateway=image_gateway,
        brand_gateway=brand_gateway,
        file_storage=file_storage,
        transaction_manager=transaction_manager,
    )


async def get_update_product_interactor(
    product_gateway=Depends(get_product_gateway),
    brand_gateway=Depends(get_brand_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import UpdateProductInteractor

    return UpdateProductInteractor(product_gateway, brand_gateway, transaction_manager)


async def get_delete_product_interactor(
    product_gateway=Depends(get_product_gateway),
    image_gateway=Depends(get_product_image_gateway),
    file_storage=Depends(get_file_storage),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import DeleteProductInteractor

    return DeleteProductInteractor(product_gateway, image_gateway, file_storage, transaction_manager)


async def get_list_products_query(product_gateway=Depends(get_product_gateway)):
    from apps.storefront.application.catalog.queries import ListProductsQuery

    return ListProductsQuery(product_gateway)


async def get_get_product_query(product_gateway=Depends(get_product_gateway)):
    from apps.storefront.application.catalog.queries import GetProductQuery

    return GetProductQuery(product_gateway)


async def get_product_properties_query(product_gateway=Depends(get_product_gateway)):
    from apps.storefront.application.catalog.queries import GetProductPropertiesQuery

    return GetProductPropertiesQuery(product_gateway)


async def get_product_children_query(
    product_gateway=Depends(get_product_gateway),
    tag_gateway=Depends(get_product_tag_gateway),
    image_gateway=Depends(get_product_image_gateway),
    review_gateway=Depends(get_product_review_gateway),
):
    from apps.storefront.application.catalog.queries import ListProductChildrenQuery

    return ListProductChildrenQuery(product_gateway, tag_gateway, image_gateway, review_gateway)


async def get_get_product_tag_query(tag_gateway=Depends(get_product_tag_gateway)):
    from apps.storefront.application.catalog.queries import GetProductTagQuery

    return GetProductTagQuery(tag_gateway)


async def get_get_product_image_query(image_gateway=Depends(get_product_image_gateway)):
    from apps.storefront.application.catalog.queries import GetProductImageQuery

    return GetProductImageQuery(image_gateway)


async def get_update_product_tag_interactor(
    tag_gateway=Depends(get_product_tag_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import UpdateProductTagInteractor

    return UpdateProductTagInteractor(tag_gateway, transaction_manager)


async def get_delete_product_tag_interactor(
    tag_gateway=Depends(get_product_tag_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import DeleteProductTagInteractor

    return DeleteProductTagInteractor(tag_gateway, transaction_manager)


async def get_replace_product_image_interactor(
    image_gateway=Depends(get_product_image_gateway),
    file_storage=Depends(get_file_storage),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import ReplaceProductImageInteractor

    return ReplaceProductImageInteractor(image_gateway, file_storage, transaction_manager)


async def get_delete_product_image_interactor(
    image_gateway=Depends(get_product_image_gateway),
    file_storage=Depends(get_file_storage),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import DeleteProductImageInteractor

    return DeleteProductImageInteractor(image_gateway, file_storage, transaction_manager)


async def get_create_review_interactor(
    product_gateway=Depends(get_product_gateway),
    review_gateway=Depends(get_product_review_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import CreateReviewInteractor

    return CreateReviewInteractor(product_gateway, review_gateway, transaction_manager)


async def get_list_brands_query(brand_gateway=Depends(get_brand_gateway)):
    from apps.storefront.application.catalog.queries import ListBrandsQuery

    return ListBrandsQuery(brand_gateway)


async def get_get_brand_query(brand_gateway=Depends(get_brand_gateway)):
    from apps.storefront.application.catalog.queries import GetBrandQuery

    return GetBrandQuery(brand_gateway)


async def get_create_brand_interactor(
    brand_gateway=Depends(get_brand_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import CreateBrandInteractor

    return CreateBrandInteractor(brand_gateway, transaction_manager)


async def get_update_brand_interactor(
    brand_gateway=Depends(get_brand_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import UpdateBrandInteractor

    return UpdateBrandInteractor(brand_gateway, transaction_manager)


async def get_delete_brand_interactor(
    brand_gateway=Depends(get_brand_gateway),
    transaction_manager=Depends(get_transaction_manager),
):
    from apps.storefront.application.catalog.commands import DeleteBrandInteractor

    return DeleteBrandInteractor(brand_gateway, transaction_manager)
