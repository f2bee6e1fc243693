"""Stored File Cleanup.

DB 작업이 실패했을 때 먼저 저장해 둔 업로드 파일을 지웁니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from apps.storefront.application.common.exceptions import FileStorageError

if TYPE_CHECKING:
    from apps.storefront.application.storage.ports import FileStorage

logger = logging.getLogger(__name__)


async def discard_stored_files(storage: "FileStorage", public_ids: Iterable[str]) -> None:
    """저장된 파일을 모두 삭제합니다.

    호출자는 원래 예외를 다시 던지므로, 여기서의 삭제 실패는 로그만 남기고
    나머지 파일 삭제를 계속합니다.
    """
    for public_id in public_ids:
        try:
            await storage.delete(public_id)
        except FileStorageError:
            logger.warning("Orphan upload left in storage", extra={"public_id": public_id})
        else:
            logger.info("Orphan upload discarded", extra={"public_id": public_id})
