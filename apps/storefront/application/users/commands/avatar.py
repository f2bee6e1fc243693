"""Avatar Commands.

프로필 이미지 업로드/삭제 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, AsyncIterator

from apps.storefront.application.storage.services import discard_stored_files
from apps.storefront.domain.exceptions.user import UserNotFoundError

if TYPE_CHECKING:
    from apps.storefront.application.common.ports import TransactionManager
    from apps.storefront.application.storage.ports import FileStorage, StoredFile
    from apps.storefront.application.users.ports import UserCommandGateway, UserQueryGateway

logger = logging.getLogger(__name__)

AVATAR_FOLDER = "avatars"


class UploadAvatarInteractor:
    """프로필 이미지 업로드.

    Workflow:
        1. 사용자 조회
        2. 새 파일 저장 (FileStorage)
        3. 사용자 정보 갱신 + 커밋 (실패하면 새 파일 삭제)
        4. 이전 파일 삭제
    """

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        file_storage: "FileStorage",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._storage = file_storage
        self._tx = transaction_manager

    async def execute(
        self,
        user_id: int,
        chunks: AsyncIterator[bytes],
        *,
        filename: str,
        content_type: str | None,
    ) -> "StoredFile":
        user = await self._user_query.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        stored = await self._storage.save(
            chunks,
            filename=filename,
            content_type=content_type,
            folder=AVATAR_FOLDER,
        )
        previous = user.avatar_public_id

        try:
            user.set_avatar(stored.url, stored.public_id)
            await self._user_command.update(user)
            await self._tx.commit()
        except Exception:
            await discard_stored_files(self._storage, [stored.public_id])
            raise

        if previous:
            await self._storage.delete(previous)

        logger.info("Avatar uploaded", extra={"user_id": user_id, "public_id": stored.public_id})
        return stored


class RemoveAvatarInteractor:
    """프로필 이미지 삭제. 이미지가 없어도 성공합니다."""

    def __init__(
        self,
        user_query_gateway: "UserQueryGateway",
        user_command_gateway: "UserCommandGateway",
        file_storage: "FileStorage",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._user_query = user_query_gateway
        self._user_command = user_command_gateway
        self._storage = file_storage
        self._tx = transaction_manager

    async def execute(self, user_id: int) -> None:
        user = await self._user_query.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        public_id = user.avatar_public_id
        if public_id is None:
            return

        user.set_avatar(None, None)
        await self._user_command.update(user)
        await self._tx.commit()
        await self._storage.delete(public_id)

        logger.info("Avatar removed", extra={"user_id": user_id})
