"""Domain value objects for the feed.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from virtue.domain.value.common import ValueObject


class ReactionType(str, Enum):
    """Reaction value as persisted.

    Only thumbs-up reactions are ever stored.
    """

    UP = "UP"


class ReactionIntent(str, Enum):
    """Reaction requested by a client.

    Both intents collapse onto ``ReactionType.UP`` when stored; a DOWN
    intent has no persisted representation of its own.
    """

    UP = "UP"
    DOWN = "DOWN"

    @property
    def stored_type(self) -> ReactionType:
        """Stored reaction type for this intent."""
        return ReactionType.UP


class IdentityClaims(ValueObject):
    """Verified identity supplied by the identity provider.

    ``external_id`` is trusted as an opaque, stable string. The profile
    fields are whatever the provider chose to include.
    """

    external_id: str
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None

    @property
    def display_name(self) -> str:
        """Best available display name.

        Falls back from the provider username to the full name, then the
        email local part, then the external id.
        """
        if self.username and self.username.strip():
            return self.username.strip()
        full_name = " ".join(
            part.strip()
            for part in (self.first_name, self.last_name)
            if part and part.strip()
        )
        if full_name:
            return full_name
        if self.email and self.email.split("@")[0]:
            return self.email.split("@")[0]
        return self.external_id


class PostCounts(ValueObject):
    """Comment and reaction totals for a post, counted at read time."""

    comments: int = 0
    reactions: int = 0
