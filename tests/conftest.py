"""
Shared fixtures for the user service tests.
"""

from unittest.mock import MagicMock

import pytest

from user_service.config import get_engine
from user_service.repositories import InMemoryUserCache, SqlUserRepository
from user_service.services import UserService


@pytest.fixture
def store():
    """SQL store on a private in-memory SQLite database."""
    repository = SqlUserRepository(engine=get_engine("sqlite://"))
    yield repository
    repository.close()


@pytest.fixture
def cache():
    """Process-local user cache."""
    return InMemoryUserCache()


@pytest.fixture
def store_probe(store):
    """Store wrapper that records every call while delegating to the real store."""
    return MagicMock(wraps=store)


@pytest.fixture
def cache_probe(cache):
    """Cache wrapper that records every call while delegating to the real cache."""
    return MagicMock(wraps=cache)


@pytest.fixture
def service(store_probe, cache_probe):
    """User service wired to the probed store and cache."""
    return UserService(store=store_probe, cache=cache_probe)
