"""Content rewrite adapters."""

from virtue.domain.service.content_service import ContentRewriter


class TrimRewriter(ContentRewriter):
    """Stores text as written, minus surrounding whitespace.

    Stand-in for the external rewriting model, which runs client-side.
    """

    def rewrite(self, text: str) -> str:
        """Return the trimmed text."""
        return text.strip()
