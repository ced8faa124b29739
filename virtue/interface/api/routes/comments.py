"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Response, status

from virtue.application.usecase.auth import GetCurrentUserUseCase
from virtue.application.usecase.base import CamelModel
from virtue.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from virtue.domain.error import DomainError, NotAuthorizedError, NotFoundError
from virtue.interface.api.auth import get_auth_token, optional_user_id, require_user

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(CamelModel):
    """API request for creating or editing a comment."""

    content: str | None = None


@router.get("/posts/{post_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    post_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    cursor: str | None = None,
    limit: int | None = None,
    token: str | None = Depends(get_auth_token),
) -> ListCommentsResponse:
    """List a post's comments newest first.

    If authenticated, each comment says whether the caller wrote it.

    Args:
        post_id: Post UUID
        list_comments_use_case: List comments use case from DI
        get_current_user_use_case: Get current user use case from DI
        cursor: ID of the last comment of the previous page
        limit: Page size (clamped to 1-100, default 20)
        token: Identity token (optional)

    Returns:
        One page of comments with pagination info

    Raises:
        HTTPException: If the post doesn't exist
    """
    user_id = await optional_user_id(get_current_user_use_case, token)
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(
                post_id=post_id, cursor=cursor, limit=limit, user_id=user_id
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> CommentItem:
    """Create a comment on a post.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment content
        create_comment_use_case: Create comment use case from DI
        get_current_user_use_case: Get current user use case from DI
        token: Identity token

    Returns:
        Created comment

    Raises:
        HTTPException: If not authenticated, the post doesn't exist, or
            validation fails
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id, author_id=user.id, content=request.content
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    except DomainError as e:
        logfire.warn("Comment creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> CommentItem:
    """Replace a comment's content.

    Only the comment author can edit.

    Raises:
        HTTPException: If not authenticated, not found, not authorized, or
            validation fails
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id, user_id=user.id, content=request.content
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )
    except DomainError as e:
        logfire.warn("Comment update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )


@router.delete(
    "/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(get_auth_token),
) -> Response:
    """Delete a comment.

    Only the comment author can delete.

    Raises:
        HTTPException: If not authenticated, not found, or not authorized
    """
    user = await require_user(get_current_user_use_case, token)

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user.id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden",
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
