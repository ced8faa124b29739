"""Unit tests for component selection in the DI container."""

import pytest

from virtue.adapter.identity import JWTIdentityVerifier, MockIdentityVerifier
from virtue.domain.repository import PostRepository
from virtue.domain.service import IdentityVerifier
from virtue.persistence.repository.inmemory import InMemoryPostRepository
from virtue.util.di import MOCKABLE_COMPONENTS
from tests.di import build_test_container


class TestTestContainer:
    """Tests for build_test_container."""

    def test_mockable_components(self):
        assert MOCKABLE_COMPONENTS == {"identity", "persistence"}

    def test_unknown_component_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"email"})

    @pytest.mark.asyncio
    async def test_everything_is_mocked_by_default(self):
        container = build_test_container()

        async with container() as request_container:
            verifier = await request_container.get(IdentityVerifier)
            posts = await request_container.get(PostRepository)

        await container.close()
        assert isinstance(verifier, MockIdentityVerifier)
        assert isinstance(posts, InMemoryPostRepository)

    @pytest.mark.asyncio
    async def test_unmocked_component_uses_production_provider(self):
        container = build_test_container(unmock={"identity"})

        async with container() as request_container:
            verifier = await request_container.get(IdentityVerifier)
            posts = await request_container.get(PostRepository)

        await container.close()
        assert isinstance(verifier, JWTIdentityVerifier)
        assert isinstance(posts, InMemoryPostRepository)
