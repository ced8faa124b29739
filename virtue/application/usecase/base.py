"""Base models shared by use cases."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request/response model exposed to API clients.

    Serialized with camelCase keys; accepts both camelCase and snake_case
    on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageInfo(CamelModel):
    """Cursor pagination metadata."""

    next_cursor: str | None
    has_next_page: bool
