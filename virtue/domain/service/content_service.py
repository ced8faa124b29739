"""User text handling shared by posts and comments."""

from abc import ABC, abstractmethod

import logfire

from virtue.domain.error import ValidationError

from .base import Service


class ContentRewriter(ABC):
    """Transform applied to user text before it is stored.

    Implementations receive trimmed, validated text and return the text to
    persist. The output is stored as-is.
    """

    @abstractmethod
    def rewrite(self, text: str) -> str:
        """Rewrite text.

        Args:
            text: Trimmed user text

        Returns:
            Text to store
        """
        pass


class ContentService(Service):
    """Domain service for validating and rewriting user text."""

    def __init__(self, rewriter: ContentRewriter) -> None:
        """Initialize content service.

        Args:
            rewriter: Content rewrite transform
        """
        self.rewriter = rewriter

    def prepare(
        self,
        text: str | None,
        field: str = "content",
        max_length: int | None = None,
        blank_is_missing: bool = False,
    ) -> str:
        """Validate and rewrite a required text field.

        Args:
            text: Raw user input (None when the field was not sent)
            field: Field name used in error messages
            max_length: Maximum length after trimming
            blank_is_missing: Report blank text as "<field> is required"
                rather than "<field> cannot be empty"

        Returns:
            Rewritten text ready to store

        Raises:
            ValidationError: If the field is missing, blank or too long
        """
        if text is None or (blank_is_missing and not text.strip()):
            raise ValidationError(f"{field} is required")

        trimmed = require_text(text, field)
        if max_length is not None and len(trimmed) > max_length:
            logfire.warn(
                "Content too long", field=field, length=len(trimmed), limit=max_length
            )
            raise ValidationError(f"{field} too long (max {max_length} chars)")

        return self.rewriter.rewrite(trimmed)


def require_text(value: str, field: str) -> str:
    """Trim a text field and reject it if nothing is left.

    Raises:
        ValidationError: If the value is blank
    """
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be empty")
    return trimmed
