"""UploadFile → 청크 스트림 변환."""

from __future__ import annotations

from typing import AsyncIterator

from fastapi import UploadFile

from apps.storefront.application.catalog.dto import FileUpload

CHUNK_SIZE = 1024 * 1024


async def iter_upload(upload: UploadFile, chunk_size: int = CHUNK_SIZE) -> AsyncIterator[bytes]:
    while True:
        chunk = await upload.read(chunk_size)
        if not chunk:
            break
        yield chunk


def to_file_upload(upload: UploadFile) -> FileUpload:
    return FileUpload(
        chunks=iter_upload(upload),
        filename=upload.filename or "upload",
        content_type=upload.content_type,
    )
