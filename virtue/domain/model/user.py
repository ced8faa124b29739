"""User aggregate root.

A user is the local record of an identity-provider account. It is created
or refreshed whenever the provider tells us about the account, and is never
deleted by this service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from virtue.domain.model.common import DomainModel, utcnow
from virtue.domain.value import UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    external_id: str  # Identity provider user id, immutable once set
    email: Optional[str] = None
    username: str
    avatar_url: str = ""  # Empty means "use the generated fallback"
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
