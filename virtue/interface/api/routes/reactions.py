"""Reaction routes.

Two styles are served side by side: ``/reaction`` reads, sets and removes
the caller's reaction explicitly, while ``/reactions`` is the like-button
toggle.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Response, status

from virtue.application.usecase.auth import GetCurrentUserUseCase
from virtue.application.usecase.base import CamelModel
from virtue.application.usecase.reaction import (
    GetReactionRequest,
    GetReactionResponse,
    GetReactionUseCase,
    RemoveReactionRequest,
    RemoveReactionUseCase,
    SetReactionRequest,
    SetReactionResponse,
    SetReactionUseCase,
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)
from virtue.domain.error import NotFoundError, ValidationError
from virtue.interface.api.auth import get_auth_token, require_user

router = APIRouter(prefix="/posts", tags=["reactions"], route_class=DishkaRoute)


class SetReactionAPIRequest(CamelModel):
    """API request for setting a reaction."""

    type: str | None = None


@router.get("/{post_id}/reaction", response_model=GetReactionResponse)
async def get_reaction(
    post_id: str,
    get_reaction_use_case: FromDishka[GetReactionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> GetReactionResponse:
    """Get the caller's reaction to a post.

    Raises:
        HTTPException: If not authenticated or the post doesn't exist
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        return await get_reaction_use_case.execute(
            GetReactionRequest(post_id=post_id, user_id=user.id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )


@router.put("/{post_id}/reaction", response_model=SetReactionResponse)
async def set_reaction(
    post_id: str,
    request: SetReactionAPIRequest,
    set_reaction_use_case: FromDishka[SetReactionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> SetReactionResponse:
    """Set the caller's reaction to a post.

    Idempotent: repeating the call leaves a single reaction. Both UP and
    DOWN are stored as UP.

    Args:
        post_id: Post UUID
        request: Reaction type ("UP" or "DOWN")
        set_reaction_use_case: Set reaction use case from DI
        get_current_user_use_case: Get current user use case from DI
        token: Identity token

    Returns:
        Clicked type, stored type and the stored reaction

    Raises:
        HTTPException: If not authenticated, the type is invalid, or the
            post doesn't exist
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        return await set_reaction_use_case.execute(
            SetReactionRequest(post_id=post_id, user_id=user.id, type=request.type)
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except Exception as e:
        logfire.error("Unexpected error setting reaction", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.post("/{post_id}/reactions", response_model=ToggleReactionResponse)
@router.delete("/{post_id}/reactions", response_model=ToggleReactionResponse)
async def toggle_reaction(
    post_id: str,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> ToggleReactionResponse:
    """Toggle the caller's reaction on a post.

    POST and DELETE behave the same: like-button clients send either.

    Returns:
        Whether the caller now has a reaction, and the post's reaction count

    Raises:
        HTTPException: If not authenticated or the post doesn't exist
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        return await toggle_reaction_use_case.execute(
            ToggleReactionRequest(post_id=post_id, user_id=user.id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except Exception as e:
        logfire.error("Unexpected error toggling reaction", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.delete(
    "/{post_id}/reaction",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def remove_reaction(
    post_id: str,
    remove_reaction_use_case: FromDishka[RemoveReactionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> Response:
    """Remove the caller's reaction, if any.

    Succeeds whether or not a reaction existed.
    """
    user = await require_user(get_current_user_use_case, token)

    await remove_reaction_use_case.execute(
        RemoveReactionRequest(post_id=post_id, user_id=user.id)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
