"""FileStorage Port.

업로드 파일을 저장하고 공개 URL을 돌려주는 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterator, Protocol


@dataclass(frozen=True, slots=True)
class StoredFile:
    url: str
    public_id: str


class FileStorage(Protocol):
    """파일 저장소 인터페이스.

    구현체:
        - LocalFileStorage (infrastructure/storage/)
    """

    async def save(
        self,
        chunks: AsyncIterator[bytes],
        *,
        filename: str,
        content_type: str | None,
        folder: str,
    ) -> StoredFile:
        """파일을 저장합니다.

        Raises:
            UnsupportedFileTypeError: 이미지가 아닌 파일
            FileTooLargeError: 크기 제한 초과
            FileStorageError: 저장 실패
        """
        ...

    async def delete(self, public_id: str) -> None:
        """파일을 삭제합니다. 이미 없으면 아무 일도 하지 않습니다."""
        ...
