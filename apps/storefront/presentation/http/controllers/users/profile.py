"""Profile controller - Current user and admin user endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from apps.storefront.application.token.dto import AuthSession
from apps.storefront.application.users.commands import (
    ChangePasswordInteractor,
    DeleteUserInteractor,
    RemoveAvatarInteractor,
    UpdateProfileInteractor,
    UploadAvatarInteractor,
)
from apps.storefront.application.users.dto import ChangePasswordRequest, ProfileUpdate
from apps.storefront.application.users.queries import GetUserQuery
from apps.storefront.domain.entities.user import User
from apps.storefront.presentation.http.auth.dependencies import get_current_session, require_admin
from apps.storefront.presentation.http.controllers.uploads import iter_upload
from apps.storefront.presentation.http.schemas.common import MessageResponse
from apps.storefront.presentation.http.schemas.users import (
    AvatarResponse,
    ChangePasswordRequestSchema,
    UserResponse,
    UserUpdateRequest,
)
from apps.storefront.setup.dependencies import (
    get_change_password_interactor,
    get_delete_user_interactor,
    get_get_user_query,
    get_remove_avatar_interactor,
    get_update_profile_interactor,
    get_upload_avatar_interactor,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users")


@router.get("/me", response_model=UserResponse, summary="내 정보")
async def get_me(
    session: AuthSession = Depends(get_current_session),
    query: GetUserQuery = Depends(get_get_user_query),
) -> UserResponse:
    return UserResponse.model_validate(await query.execute(session.user_id))


@router.patch("", response_model=UserResponse, summary="프로필 수정")
async def update_profile(
    body: UserUpdateRequest,
    session: AuthSession = Depends(get_current_session),
    interactor: UpdateProfileInteractor = Depends(get_update_profile_interactor),
) -> UserResponse:
    user = await interactor.execute(session.user_id, ProfileUpdate(**body.model_dump()))
    return UserResponse.model_validate(user)


@router.put("/password", response_model=MessageResponse, summary="비밀번호 변경")
async def change_password(
    body: ChangePasswordRequestSchema,
    session: AuthSession = Depends(get_current_session),
    interactor: ChangePasswordInteractor = Depends(get_change_password_interactor),
) -> MessageResponse:
    await interactor.execute(session.user_id, ChangePasswordRequest(**body.model_dump()))
    return MessageResponse(message="password updated")


@router.post(
    "/avatar",
    response_model=AvatarResponse,
    status_code=status.HTTP_201_CREATED,
    summary="프로필 이미지 업로드",
)
async def upload_avatar(
    avatar: UploadFile = File(...),
    session: AuthSession = Depends(get_current_session),
    interactor: UploadAvatarInteractor = Depends(get_upload_avatar_interactor),
) -> AvatarResponse:
    stored = await interactor.execute(
        session.user_id,
        iter_upload(avatar),
        filename=avatar.filename or "avatar",
        content_type=avatar.content_type,
    )
    return AvatarResponse(avatar_url=stored.url, avatar_public_id=stored.public_id)


@router.patch("/avatar", response_model=MessageResponse, summary="프로필 이미지 삭제")
async def remove_avatar(
    session: AuthSession = Depends(get_current_session),
    interactor: RemoveAvatarInteractor = Depends(get_remove_avatar_interactor),
) -> MessageResponse:
    await interactor.execute(session.user_id)
    return MessageResponse(message="avatar removed")


@router.get("/{user_id}", response_model=UserResponse, summary="사용자 조회")
async def get_user(
    user_id: int,
    session: AuthSession = Depends(get_current_session),
    query: GetUserQuery = Depends(get_get_user_query),
) -> UserResponse:
    return UserResponse.model_validate(await query.execute(user_id))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="사용자 삭제 (관리자)")
async def delete_user(
    user_id: int,
    admin: User = Depends(require_admin),
    interactor: DeleteUserInteractor = Depends(get_delete_user_interactor),
) -> Response:
    await interactor.execute(user_id)
    logger.info("User deleted by admin", extra={"user_id": user_id, "admin_id": admin.id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
