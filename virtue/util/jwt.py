"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from virtue.config import AuthSettings


class JWTError(Exception):
    """JWT-related error."""

    pass


_jwk_clients: dict[str, jwt.PyJWKClient] = {}


def _jwk_client(jwks_url: str) -> jwt.PyJWKClient:
    # PyJWKClient caches fetched keys, so keep one per URL
    if jwks_url not in _jwk_clients:
        _jwk_clients[jwks_url] = jwt.PyJWKClient(jwks_url)
    return _jwk_clients[jwks_url]


def create_token(
    subject: str,
    settings: AuthSettings,
    expires_in: timedelta = timedelta(hours=1),
    **claims: Any,
) -> str:
    """Create a shared-secret JWT for a subject.

    Used for local development and tests; production tokens come from the
    identity provider.

    Args:
        subject: External user id (``sub`` claim)
        settings: Authentication settings
        expires_in: Token lifetime
        **claims: Extra claims (email, username, ...)

    Returns:
        Encoded JWT token
    """
    payload: dict[str, Any] = {
        "sub": subject,
        "exp": datetime.now(timezone.utc) + expires_in,
        **claims,
    }
    if settings.jwt_audience:
        payload.setdefault("aud", settings.jwt_audience)
    if settings.jwt_issuer:
        payload.setdefault("iss", settings.jwt_issuer)

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> dict[str, Any]:
    """Verify and decode an identity provider JWT.

    Uses the provider's JWKS endpoint when configured, otherwise the shared
    secret.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token claims

    Raises:
        JWTError: If token is invalid or expired
    """
    options = {"require": ["sub", "exp"]}
    try:
        if settings.jwks_url:
            signing_key = _jwk_client(settings.jwks_url).get_signing_key_from_jwt(token)
            key: Any = signing_key.key
            algorithms = ["RS256"]
        else:
            key = settings.jwt_secret
            algorithms = [settings.jwt_algorithm]

        return jwt.decode(
            token,
            key,
            algorithms=algorithms,
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options=options,
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.PyJWKClientError as e:
        raise JWTError(f"Unable to load signing key: {e}")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
