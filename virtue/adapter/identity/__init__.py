"""Identity provider adapters."""

from .jwt import JWTIdentityVerifier
from .mock import MockIdentityVerifier

__all__ = [
    "JWTIdentityVerifier",
    "MockIdentityVerifier",
]
