"""Local File Storage.

FileStorage 포트의 구현체입니다.
업로드 파일을 로컬 디렉터리에 청크 단위로 기록하고 정적 URL을 돌려줍니다.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import PurePosixPath
from typing import AsyncIterator

import anyio

from apps.storefront.application.common.exceptions import FileStorageError
from apps.storefront.application.storage.exceptions import (
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from apps.storefront.application.storage.ports import StoredFile

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class LocalFileStorage:
    """로컬 디렉터리 기반 파일 저장소.

    public_id 형식: {folder}/{uuid4}{ext}
    """

    def __init__(self, *, root_dir: str, base_url: str, max_bytes: int) -> None:
        self._root = anyio.Path(root_dir)
        self._base_url = base_url.rstrip("/")
        self._max_bytes = max_bytes

    def _url(self, public_id: str) -> str:
        return f"{self._base_url}/{public_id}"

    def _resolve(self, public_id: str) -> anyio.Path:
        parts = PurePosixPath(public_id).parts
        if not parts or ".." in parts or PurePosixPath(public_id).is_absolute():
            raise FileStorageError(f"Invalid file id: {public_id}")
        return self._root.joinpath(*parts)

    async def save(
        self,
        chunks: AsyncIterator[bytes],
        *,
        filename: str,
        content_type: str | None,
        folder: str,
    ) -> StoredFile:
        content_type = (content_type or "").lower().strip()
        if content_type not in ALLOWED_CONTENT_TYPES:
            raise UnsupportedFileTypeError(content_type or None)

        public_id = f"{folder}/{uuid.uuid4()}{ALLOWED_CONTENT_TYPES[content_type]}"
        dest = self._resolve(public_id)

        written = 0
        try:
            await dest.parent.mkdir(parents=True, exist_ok=True)
            async with await dest.open("wb") as f:
                async for chunk in chunks:
                    written += len(chunk)
                    if written > self._max_bytes:
                        raise FileTooLargeError(self._max_bytes)
                    await f.write(chunk)
        except FileTooLargeError:
            await dest.unlink(missing_ok=True)
            raise
        except OSError as e:
            await dest.unlink(missing_ok=True)
            logger.error("File save failed", extra={"public_id": public_id, "error": str(e)})
            raise FileStorageError() from e

        logger.info(
            "File stored",
            extra={"public_id": public_id, "upload_name": filename, "bytes": written},
        )
        return StoredFile(url=self._url(public_id), public_id=public_id)

    async def delete(self, public_id: str) -> None:
        path = self._resolve(public_id)
        try:
            await path.unlink(missing_ok=True)
        except OSError as e:
            logger.error("File delete failed", extra={"public_id": public_id, "error": str(e)})
            raise FileStorageError("could not delete the file") from e
