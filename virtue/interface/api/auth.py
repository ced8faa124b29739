"""Request authentication helpers shared by the route modules."""

import logfire
from fastapi import Cookie, Header, HTTPException, status

from virtue.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from virtue.application.usecase.user import CurrentUserResponse
from virtue.domain.error import NotAuthenticatedError, UserNotProvisionedError

BEARER_PREFIX = "bearer "


def get_auth_token(
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> str | None:
    """Extract the identity token from the request.

    ``Authorization: Bearer <token>`` takes precedence over the
    ``auth_token`` cookie.
    """
    if authorization and authorization.lower().startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX) :].strip()
        if token:
            return token
    return auth_token or None


async def require_user(
    get_current_user_use_case: GetCurrentUserUseCase, token: str | None
) -> CurrentUserResponse:
    """Resolve the authenticated user or fail the request.

    Raises:
        HTTPException: 401 without a valid token, 404 if the user must sync
            first
    """
    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except NotAuthenticatedError as e:
        logfire.debug("Authentication failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    except UserNotProvisionedError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user


async def optional_user_id(
    get_current_user_use_case: GetCurrentUserUseCase, token: str | None
) -> str | None:
    """Resolve the viewer's user id for public endpoints, if any."""
    user = await get_current_user_use_case.execute(
        GetCurrentUserRequest(token=token, optional=True)
    )
    return user.id if user else None
