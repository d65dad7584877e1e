"""Tests for provider selection and test container assembly."""

import pytest

from realjobs.adapter.openai import MockSentimentClassifier
from realjobs.domain.repository import JobRepository
from realjobs.domain.service import CommentNotifier, SentimentClassifier
from realjobs.persistence.repository.inmemory import InMemoryJobRepository
from realjobs.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    ProdSentimentProvider,
    SentimentProvider,
    get_provider,
)
from realjobs.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, MockSentimentProvider, build_test_container
from tests.harness import create_env_fixture

env = create_env_fixture()


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_used_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_production_implementation(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(SentimentProvider) is ProdSentimentProvider

    def test_mock_implementation(self):
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        assert get_provider(SentimentProvider, use_mock=True) is MockSentimentProvider


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_rejected(self):
        with pytest.raises(DependencyInjectionError, match="Unknown components"):
            build_test_container(unmock={"email"})  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_mocks_by_default(self, env):
        job_repository = await env.get(JobRepository)
        classifier = await env.get(SentimentClassifier)

        assert isinstance(job_repository, InMemoryJobRepository)
        assert isinstance(classifier, MockSentimentClassifier)

    @pytest.mark.asyncio
    async def test_notifier_shared_across_requests(self, env):
        first = await env.get(CommentNotifier)
        second = await env.get(CommentNotifier)

        assert first is second
