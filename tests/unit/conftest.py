"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.chef_profile import ChefProfile


class FakeUnitOfWork:
    """Fake Unit of Work with a mocked profile repository for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


def make_profile(owner_id: UUID, **overrides: Any) -> ChefProfile:
    """A valid profile with sensible defaults."""
    fields: dict[str, Any] = {
        "chef_name": "Chef Ana",
        "experience_level": 5,
        "cuisine_specialties": ["Italian"],
        "signature_dishes": ["Lasagna"],
        "recipe_collection": ["Carbonara"],
    }
    fields.update(overrides)
    return ChefProfile(owner_id=owner_id, **fields)


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def owner_id() -> UUID:
    """A random caller identity."""
    return uuid4()


@pytest.fixture
def other_id() -> UUID:
    """A random identity distinct from owner_id."""
    return uuid4()
