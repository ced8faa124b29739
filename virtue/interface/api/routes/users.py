"""User routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status

from virtue.application.usecase.auth import GetCurrentUserUseCase
from virtue.application.usecase.base import CamelModel
from virtue.application.usecase.user import (
    CurrentUserResponse,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    SyncUserRequest,
    SyncUserUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UserProfileResponse,
)
from virtue.domain.error import DomainError, NotAuthenticatedError, NotFoundError
from virtue.interface.api.auth import get_auth_token, require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(CamelModel):
    """API request for updating the current user's profile."""

    username: str | None = None
    avatar_url: str | None = None


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> CurrentUserResponse:
    """Get the authenticated user.

    Returns:
        The caller's user record with the resolved avatar

    Raises:
        HTTPException: If not authenticated
    """
    return await require_user(get_current_user_use_case, token)


@router.post("/sync", response_model=CurrentUserResponse)
async def sync_user(
    sync_user_use_case: FromDishka[SyncUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> CurrentUserResponse:
    """Create or refresh the caller's user from identity provider claims.

    Raises:
        HTTPException: If not authenticated
    """
    try:
        return await sync_user_use_case.execute(SyncUserRequest(token=token))
    except NotAuthenticatedError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    except Exception as e:
        logfire.error("Unexpected error syncing user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.patch("/me", response_model=CurrentUserResponse)
async def update_me(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> CurrentUserResponse:
    """Update the caller's display name and/or avatar.

    Args:
        request: Profile changes; an empty avatar URL clears the avatar
        update_profile_use_case: Update profile use case from DI
        get_current_user_use_case: Get current user use case from DI
        token: Identity token

    Returns:
        Updated user

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=user.id,
                username=request.username,
                avatar_url=request.avatar_url,
            )
        )
    except DomainError as e:
        logfire.warn("Profile update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfileResponse:
    """Get a user's public profile.

    Raises:
        HTTPException: If the user doesn't exist
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
