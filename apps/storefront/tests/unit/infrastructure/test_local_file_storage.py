"""Local File Storage 단위 테스트."""

from pathlib import Path

import pytest

from apps.storefront.application.common.exceptions import FileStorageError
from apps.storefront.application.storage.exceptions import (
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from apps.storefront.infrastructure.storage.local_file_storage import LocalFileStorage


async def stream(*chunks: bytes):
    for chunk in chunks:
        yield chunk


class TestLocalFileStorage:
    @pytest.fixture
    def storage(self, tmp_path: Path) -> LocalFileStorage:
        return LocalFileStorage(root_dir=str(tmp_path), base_url="/uploads/", max_bytes=10)

    @pytest.mark.asyncio
    async def test_save_writes_chunks(self, storage: LocalFileStorage, tmp_path: Path) -> None:
        stored = await storage.save(
            stream(b"abc", b"def"),
            filename="photo.png",
            content_type="image/png",
            folder="avatars",
        )

        assert stored.public_id.startswith("avatars/")
        assert stored.public_id.endswith(".png")
        assert stored.url == f"/uploads/{stored.public_id}"
        assert (tmp_path / stored.public_id).read_bytes() == b"abcdef"

    @pytest.mark.asyncio
    async def test_rejects_non_image(self, storage: LocalFileStorage) -> None:
        with pytest.raises(UnsupportedFileTypeError):
            await storage.save(
                stream(b"x"), filename="a.txt", content_type="text/plain", folder="avatars"
            )

    @pytest.mark.asyncio
    async def test_too_large_removes_partial_file(
        self, storage: LocalFileStorage, tmp_path: Path
    ) -> None:
        with pytest.raises(FileTooLargeError):
            await storage.save(
                stream(b"123456", b"789012"),
                filename="big.jpg",
                content_type="image/jpeg",
                folder="products",
            )

        assert list((tmp_path / "products").iterdir()) == []

    @pytest.mark.asyncio
    async def test_delete(self, storage: LocalFileStorage, tmp_path: Path) -> None:
        stored = await storage.save(
            stream(b"a"), filename="a.gif", content_type="image/gif", folder="products"
        )

        await storage.delete(stored.public_id)
        # 이미 없는 파일 삭제는 조용히 넘어갑니다
        await storage.delete(stored.public_id)

        assert not (tmp_path / stored.public_id).exists()

    @pytest.mark.asyncio
    async def test_delete_rejects_path_traversal(self, storage: LocalFileStorage) -> None:
        with pytest.raises(FileStorageError):
            await storage.delete("../etc/passwd")
