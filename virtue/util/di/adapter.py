"""Adapter DI providers."""

from dishka import Scope, provide

from virtue.adapter.rewrite import TrimRewriter
from virtue.adapter.webhook import WebhookVerifier
from virtue.config import AuthSettings
from virtue.domain.service import ContentRewriter, ContentService
from virtue.util.di.base import ProviderBase


class ProdAdapterProvider(ProviderBase):
    """Stateless adapters shared by every request."""

    scope = Scope.APP

    @provide
    def get_content_rewriter(self) -> ContentRewriter:
        """Provide the content rewrite transform."""
        return TrimRewriter()

    @provide
    def get_content_service(self, rewriter: ContentRewriter) -> ContentService:
        """Provide content domain service."""
        return ContentService(rewriter=rewriter)

    @provide
    def get_webhook_verifier(self, auth_settings: AuthSettings) -> WebhookVerifier:
        """Provide webhook signature verifier."""
        return WebhookVerifier(auth_settings=auth_settings)
