"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Response, status

from virtue.application.usecase.auth import GetCurrentUserUseCase
from virtue.application.usecase.base import CamelModel
from virtue.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostItem,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from virtue.domain.error import DomainError, NotAuthorizedError, NotFoundError
from virtue.interface.api.auth import get_auth_token, optional_user_id, require_user

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(CamelModel):
    """API request for creating a post."""

    content: str | None = None
    image_url: str | None = None


class UpdatePostAPIRequest(CamelModel):
    """API request for updating a post. Unset fields are left unchanged."""

    content: str | None = None
    image_url: str | None = None


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    cursor: str | None = None,
    limit: int | None = None,
    token: str | None = Depends(get_auth_token),
) -> ListPostsResponse:
    """List posts newest first.

    Authentication is optional; when present, each post says whether the
    caller has reacted to it.

    Args:
        list_posts_use_case: List posts use case from DI
        get_current_user_use_case: Get current user use case from DI
        cursor: ID of the last post of the previous page
        limit: Page size (clamped to 1-50, default 10)
        token: Identity token (optional)

    Returns:
        One page of posts with pagination info
    """
    user_id = await optional_user_id(get_current_user_use_case, token)
    return await list_posts_use_case.execute(
        ListPostsRequest(cursor=cursor, limit=limit, user_id=user_id)
    )


@router.get("/{post_id}", response_model=PostItem)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> PostItem:
    """Get a single post.

    Args:
        post_id: Post UUID
        get_post_use_case: Get post use case from DI
        get_current_user_use_case: Get current user use case from DI
        token: Identity token (optional)

    Returns:
        Post with author, counts and the caller's reaction state

    Raises:
        HTTPException: If the post doesn't exist
    """
    user_id = await optional_user_id(get_current_user_use_case, token)
    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=post_id, user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )


@router.post("", response_model=PostItem, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> PostItem:
    """Create a new post.

    Requires authentication.

    Args:
        request: Post content and optional image URL
        create_post_use_case: Create post use case from DI
        get_current_user_use_case: Get current user use case from DI
        token: Identity token

    Returns:
        Created post

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user.id,
                content=request.content,
                image_url=request.image_url,
            )
        )
    except DomainError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.patch("/{post_id}", response_model=PostItem)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> PostItem:
    """Update a post's content and/or image.

    Only the post author can edit.

    Args:
        post_id: Post UUID
        request: Fields to change
        update_post_use_case: Update post use case from DI
        get_current_user_use_case: Get current user use case from DI
        token: Identity token

    Returns:
        Updated post

    Raises:
        HTTPException: If not authenticated, not found, not authorized, or
            validation fails
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user.id,
                content=request.content,
                image_url=request.image_url,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )
    except DomainError as e:
        logfire.warn("Post update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error updating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.delete(
    "/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> Response:
    """Delete a post with its comments and reactions.

    Only the post author can delete.

    Raises:
        HTTPException: If not authenticated, not found, or not authorized
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user.id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
