"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.chef_profile_service import ChefProfileService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_chef_profile_service() -> ChefProfileService:
    """Get ChefProfile service instance."""
    return ChefProfileService(get_uow_factory())
