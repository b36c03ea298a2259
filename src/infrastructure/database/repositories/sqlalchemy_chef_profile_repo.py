"""SQLAlchemy implementation of ChefProfile repository."""

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.chef_profile import ChefProfile
from infrastructure.database.models import ChefProfileModel


class SQLAlchemyChefProfileRepository:
    """SQLAlchemy implementation of IChefProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, owner_id: UUID) -> ChefProfile | None:
        """Get the profile owned by an identity."""
        model = await self._get_model(owner_id)
        return self._to_entity(model) if model else None

    async def exists(self, owner_id: UUID) -> bool:
        """Check whether the identity owns a profile."""
        stmt = select(ChefProfileModel.owner_id).where(ChefProfileModel.owner_id == owner_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, profile: ChefProfile) -> ChefProfile:
        """Insert a new profile."""
        model = self._to_model(profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: ChefProfile) -> ChefProfile | None:
        """Persist every field of an existing profile; None if the row is gone."""
        model = await self._get_model(profile.owner_id)

        if not model:
            return None

        model.chef_name = profile.chef_name
        model.experience_level = profile.experience_level
        # Fresh list objects so the JSON columns are flagged as changed.
        model.cuisine_specialties = list(profile.cuisine_specialties)
        model.signature_dishes = list(profile.signature_dishes)
        model.recipe_collection = list(profile.recipe_collection)
        model.updated_at = profile.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, owner_id: UUID) -> bool:
        """Delete a profile."""
        model = await self._get_model(owner_id)

        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def count(self) -> int:
        """Count stored profiles."""
        stmt = select(func.count()).select_from(ChefProfileModel)
        result = await self._session.execute(stmt)
        return result.scalar() or 0

    async def _get_model(self, owner_id: UUID) -> ChefProfileModel | None:
        stmt = select(ChefProfileModel).where(ChefProfileModel.owner_id == owner_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ChefProfileModel) -> ChefProfile:
        """Convert ORM model to domain entity."""
        return ChefProfile(
            owner_id=model.owner_id,
            chef_name=model.chef_name,
            experience_level=model.experience_level,
            cuisine_specialties=list(model.cuisine_specialties),
            signature_dishes=list(model.signature_dishes),
            recipe_collection=list(model.recipe_collection),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: ChefProfile) -> ChefProfileModel:
        """Convert domain entity to ORM model."""
        return ChefProfileModel(
            owner_id=entity.owner_id,
            chef_name=entity.chef_name,
            experience_level=entity.experience_level,
            cuisine_specialties=list(entity.cuisine_specialties),
            signature_dishes=list(entity.signature_dishes),
            recipe_collection=list(entity.recipe_collection),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
