"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from bookshelf.graphql.context import build_context
from bookshelf.store import BookStore


@pytest.fixture
def store() -> BookStore:
    """A fresh store holding the two seed books."""
    return BookStore.with_seed_data()


@pytest.fixture
def context(store: BookStore) -> dict[str, Any]:
    """GraphQL context wired to the ``store`` fixture."""
    return build_context(store)


@pytest.fixture
def mock_info(context: dict[str, Any]) -> MagicMock:
    """Create a mock GraphQL info object carrying the store context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = context
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
