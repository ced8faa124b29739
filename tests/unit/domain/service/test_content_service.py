"""Unit tests for ContentService."""

import pytest

from virtue.domain.error import ValidationError
from virtue.domain.service import ContentRewriter, ContentService


class ShoutingRewriter(ContentRewriter):
    def rewrite(self, text: str) -> str:
        return text.upper()


@pytest.fixture
def content_service() -> ContentService:
    return ContentService(ShoutingRewriter())


class TestContentRewriter:
    """Tests for the rewriter interface."""

    def test_rewriter_is_abstract(self):
        with pytest.raises(TypeError):
            ContentRewriter()

    def test_rewriter_must_implement_rewrite(self):
        class Incomplete(ContentRewriter):
            pass

        with pytest.raises(TypeError):
            Incomplete()


class TestPrepare:
    """Tests for prepare."""

    def test_trimmed_text_is_rewritten(self, content_service):
        assert content_service.prepare("  be kind  ") == "BE KIND"

    def test_missing_text_is_required(self, content_service):
        with pytest.raises(ValidationError, match="content is required"):
            content_service.prepare(None)

    def test_blank_text_cannot_be_empty(self, content_service):
        with pytest.raises(ValidationError, match="content cannot be empty"):
            content_service.prepare("   ")

    def test_blank_text_can_count_as_missing(self, content_service):
        """New posts report whitespace-only text as missing."""
        with pytest.raises(ValidationError, match="content is required"):
            content_service.prepare("   ", blank_is_missing=True)

    def test_length_is_checked_after_trimming(self, content_service):
        assert content_service.prepare(" " + "a" * 5 + " ", max_length=5) == "AAAAA"

        with pytest.raises(ValidationError, match=r"content too long \(max 5 chars\)"):
            content_service.prepare("a" * 6, max_length=5)
