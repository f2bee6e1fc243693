"""Catalog Command / Query 테스트."""

from unittest.mock import AsyncMock

import pytest

from apps.storefront.application.catalog.commands import (
    CreateBrandInteractor,
    CreateProductInteractor,
    CreateReviewInteractor,
    DeleteProductInteractor,
    ReplaceProductImageInteractor,
    UpdateBrandInteractor,
    UpdateProductInteractor,
    UpdateProductTagInteractor,
)
from apps.storefront.application.catalog.dto import (
    BrandInput,
    BrandPatch,
    FileUpload,
    ProductInput,
    ProductPatch,
    ReviewInput,
)
from apps.storefront.application.catalog.queries import ListProductsQuery
from apps.storefront.application.common.dto import PageRequest
from apps.storefront.application.common.exceptions import DataMapperError, FileStorageError
from apps.storefront.application.storage.exceptions import UnsupportedFileTypeError
from apps.storefront.application.storage.ports import StoredFile
from apps.storefront.domain.entities.product import ProductImage, ProductTag
from apps.storefront.domain.exceptions.catalog import (
    BrandNotFoundError,
    ProductNotFoundError,
    ProductTagNotFoundError,
)
from apps.storefront.domain.exceptions.validation import NoChangesProvidedError, ValidationError
from apps.storefront.tests.unit.factories import create_brand, create_product


async def _chunks():
    yield b"img"


def _upload(name: str = "a.png") -> FileUpload:
    return FileUpload(chunks=_chunks(), filename=name, content_type="image/png")


def _with_ids(start: int):
    """add/add_many 대역: id를 차례로 부여합니다."""
    counter = iter(range(start, start + 100))

    async def assign(entity):
        if isinstance(entity, list):
            for item in entity:
                item.id = next(counter)
            return entity
        entity.id = next(counter)
        return entity

    return assign


@pytest.fixture
def gateways() -> dict[str, AsyncMock]:
    products, tags, images, brands, reviews = (AsyncMock() for _ in range(5))
    products.add.side_effect = _with_ids(11)
    products.update.side_effect = lambda p: p
    products.get_by_id.return_value = create_product()
    tags.add_many.side_effect = _with_ids(100)
    images.add_many.side_effect = _with_ids(200)
    images.list_by_product.return_value = []
    brands.get_by_id.return_value = create_brand()
    brands.add.side_effect = _with_ids(3)
    reviews.add.side_effect = _with_ids(300)
    return {
        "products": products,
        "tags": tags,
        "images": images,
        "brands": brands,
        "reviews": reviews,
    }


class TestProductCommands:
    @pytest.mark.asyncio
    async def test_create_product_with_files_and_tags(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        mock_file_storage.save.side_effect = [
            StoredFile(url="/uploads/products/main.png", public_id="products/main.png"),
            StoredFile(url="/uploads/products/extra.png", public_id="products/extra.png"),
        ]
        interactor = CreateProductInteractor(
            gateways["products"],
            gateways["tags"],
            gateways["images"],
            gateways["brands"],
            mock_file_storage,
            mock_transaction_manager,
        )

        details = await interactor.execute(
            ProductInput(
                brand_id=3,
                name="Runner",
                slug="runner",
                price=12_900,
                sku="RUN-001",
                tags=["sport", " sport ", "", "shoe"],
            ),
            image=_upload(),
            images=[_upload("b.png")],
        )

        assert details.product.id == 11
        assert details.product.image_url == "/uploads/products/main.png"
        assert [t.name for t in details.tags] == ["sport", "shoe"]
        assert [i.public_id for i in details.images] == ["products/extra.png"]
        assert all(t.product_id == 11 for t in details.tags)
        mock_transaction_manager.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_product_unknown_brand(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        gateways["brands"].get_by_id.return_value = None
        interactor = CreateProductInteractor(
            gateways["products"],
            gateways["tags"],
            gateways["images"],
            gateways["brands"],
            mock_file_storage,
            mock_transaction_manager,
        )

        with pytest.raises(BrandNotFoundError):
            await interactor.execute(
                ProductInput(brand_id=9, name="X", slug="x", price=1, sku="X-1")
            )
        mock_file_storage.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_product_discards_stored_files_when_upload_rejected(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        """두 번째 업로드가 거부되면 먼저 저장한 대표 이미지를 지웁니다."""
        mock_file_storage.save.side_effect = [
            StoredFile(url="/uploads/products/main.png", public_id="products/main.png"),
            UnsupportedFileTypeError("application/pdf"),
        ]
        interactor = CreateProductInteractor(
            gateways["products"],
            gateways["tags"],
            gateways["images"],
            gateways["brands"],
            mock_file_storage,
            mock_transaction_manager,
        )

        with pytest.raises(UnsupportedFileTypeError):
            await interactor.execute(
                ProductInput(brand_id=3, name="Runner", slug="runner", price=1, sku="RUN-001"),
                image=_upload(),
                images=[_upload("manual.pdf")],
            )

        mock_file_storage.delete.assert_awaited_once_with("products/main.png")
        mock_transaction_manager.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_product_discards_stored_files_when_commit_fails(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        mock_file_storage.save.side_effect = [
            StoredFile(url="/uploads/products/main.png", public_id="products/main.png"),
            StoredFile(url="/uploads/products/extra.png", public_id="products/extra.png"),
        ]
        mock_transaction_manager.commit.side_effect = DataMapperError()
        interactor = CreateProductInteractor(
            gateways["products"],
            gateways["tags"],
            gateways["images"],
            gateways["brands"],
            mock_file_storage,
            mock_transaction_manager,
        )

        with pytest.raises(DataMapperError):
            await interactor.execute(
                ProductInput(brand_id=3, name="Runner", slug="runner", price=1, sku="RUN-001"),
                image=_upload(),
                images=[_upload("b.png")],
            )

        deleted = [call.args[0] for call in mock_file_storage.delete.await_args_list]
        assert deleted == ["products/main.png", "products/extra.png"]

    @pytest.mark.asyncio
    async def test_cleanup_failure_does_not_mask_original_error(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        gateways["products"].add.side_effect = DataMapperError()
        mock_file_storage.delete.side_effect = FileStorageError()
        interactor = CreateProductInteractor(
            gateways["products"],
            gateways["tags"],
            gateways["images"],
            gateways["brands"],
            mock_file_storage,
            mock_transaction_manager,
        )

        with pytest.raises(DataMapperError):
            await interactor.execute(
                ProductInput(brand_id=3, name="Runner", slug="runner", price=1, sku="RUN-001"),
                image=_upload(),
            )

        mock_file_storage.delete.assert_awaited_once_with("avatars/abc.png")

    @pytest.mark.asyncio
    async def test_update_product(
        self, gateways: dict[str, AsyncMock], mock_transaction_manager: AsyncMock
    ) -> None:
        gateways["products"].update.side_effect = None
        gateways["products"].update.return_value = create_product(stock=0)
        interactor = UpdateProductInteractor(
            gateways["products"], gateways["brands"], mock_transaction_manager
        )

        product = await interactor.execute(11, ProductPatch(stock=0))

        assert not product.in_stock

    @pytest.mark.asyncio
    async def test_update_product_without_changes(
        self, gateways: dict[str, AsyncMock], mock_transaction_manager: AsyncMock
    ) -> None:
        interactor = UpdateProductInteractor(
            gateways["products"], gateways["brands"], mock_transaction_manager
        )

        with pytest.raises(NoChangesProvidedError):
            await interactor.execute(11, ProductPatch())

    @pytest.mark.asyncio
    async def test_delete_product_removes_files(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        product = create_product()
        product.set_image("/uploads/products/main.png", "products/main.png")
        gateways["products"].get_by_id.return_value = product
        gateways["images"].list_by_product.return_value = [
            ProductImage(id=200, product_id=11, url="/u/products/x.png", public_id="products/x.png")
        ]
        interactor = DeleteProductInteractor(
            gateways["products"], gateways["images"], mock_file_storage, mock_transaction_manager
        )

        await interactor.execute(11)

        gateways["products"].delete.assert_awaited_once_with(11)
        deleted = [call.args[0] for call in mock_file_storage.delete.await_args_list]
        assert deleted == ["products/x.png", "products/main.png"]

    @pytest.mark.asyncio
    async def test_delete_missing_product(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        gateways["products"].get_by_id.return_value = None
        interactor = DeleteProductInteractor(
            gateways["products"], gateways["images"], mock_file_storage, mock_transaction_manager
        )

        with pytest.raises(ProductNotFoundError):
            await interactor.execute(11)


class TestProductChildren:
    @pytest.mark.asyncio
    async def test_rename_tag(
        self, gateways: dict[str, AsyncMock], mock_transaction_manager: AsyncMock
    ) -> None:
        tag = ProductTag(id=100, product_id=11, name="old")
        gateways["tags"].get_by_id.return_value = tag
        gateways["tags"].update.side_effect = lambda t: t

        result = await UpdateProductTagInteractor(
            gateways["tags"], mock_transaction_manager
        ).execute(100, "  new ")

        assert result.name == "new"

    @pytest.mark.asyncio
    async def test_rename_missing_tag(
        self, gateways: dict[str, AsyncMock], mock_transaction_manager: AsyncMock
    ) -> None:
        gateways["tags"].get_by_id.return_value = None

        with pytest.raises(ProductTagNotFoundError):
            await UpdateProductTagInteractor(gateways["tags"], mock_transaction_manager).execute(
                100, "new"
            )

    @pytest.mark.asyncio
    async def test_replace_image_deletes_previous_file(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        image = ProductImage(id=200, product_id=11, url="/u/old.png", public_id="products/old.png")
        gateways["images"].get_by_id.return_value = image
        gateways["images"].update.side_effect = lambda i: i

        result = await ReplaceProductImageInteractor(
            gateways["images"], mock_file_storage, mock_transaction_manager
        ).execute(200, _upload())

        assert result.public_id == "avatars/abc.png"
        mock_file_storage.delete.assert_awaited_once_with("products/old.png")

    @pytest.mark.asyncio
    async def test_replace_image_discards_new_file_when_update_fails(
        self,
        gateways: dict[str, AsyncMock],
        mock_file_storage: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        image = ProductImage(id=200, product_id=11, url="/u/old.png", public_id="products/old.png")
        gateways["images"].get_by_id.return_value = image
        gateways["images"].update.side_effect = DataMapperError()

        with pytest.raises(DataMapperError):
            await ReplaceProductImageInteractor(
                gateways["images"], mock_file_storage, mock_transaction_manager
            ).execute(200, _upload())

        mock_file_storage.delete.assert_awaited_once_with("avatars/abc.png")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 6])
    async def test_review_rating_out_of_range(
        self, rating: int, gateways: dict[str, AsyncMock], mock_transaction_manager: AsyncMock
    ) -> None:
        interactor = CreateReviewInteractor(
            gateways["products"], gateways["reviews"], mock_transaction_manager
        )

        with pytest.raises(ValidationError):
            await interactor.execute(42, 11, ReviewInput(rating=rating))

    @pytest.mark.asyncio
    async def test_create_review(
        self, gateways: dict[str, AsyncMock], mock_transaction_manager: AsyncMock
    ) -> None:
        interactor = CreateReviewInteractor(
            gateways["products"], gateways["reviews"], mock_transaction_manager
        )

        review = await interactor.execute(42, 11, ReviewInput(rating=4, title="Good"))

        assert review.id == 300
        assert review.user_id == 42
        assert review.product_id == 11


class TestCatalogQueries:
    @pytest.mark.asyncio
    async def test_list_products_page(self, gateways: dict[str, AsyncMock]) -> None:
        gateways["products"].list_page.return_value = ([create_product()], 101)

        page = await ListProductsQuery(gateways["products"]).execute(PageRequest.of(2, 50))

        assert page.page == 2
        assert page.total_count == 101
        assert page.page_count == 3
        gateways["products"].list_page.assert_awaited_once_with(
            PageRequest(page=2, per_page=50), featured_only=False
        )


class TestBrandCommands:
    @pytest.mark.asyncio
    async def test_create_brand_normalizes_email(
        self, gateways: dict[str, AsyncMock], mock_transaction_manager: AsyncMock
    ) -> None:
        brand = await CreateBrandInteractor(gateways["brands"], mock_transaction_manager).execute(
            BrandInput(name="Acme", slug="acme", email=" Info@Acme.TEST ")
        )

        assert brand.email == "info@acme.test"

    @pytest.mark.asyncio
    async def test_update_missing_brand(
        self, gateways: dict[str, AsyncMock], mock_transaction_manager: AsyncMock
    ) -> None:
        gateways["brands"].get_by_id.return_value = None

        with pytest.raises(BrandNotFoundError):
            await UpdateBrandInteractor(gateways["brands"], mock_transaction_manager).execute(
                3, BrandPatch(name="New")
            )
