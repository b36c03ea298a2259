"""Chef profile service layer with business logic."""

from typing import Callable, List, Sequence, Tuple
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    InvalidProfileInputError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
    SelfEndorsementError,
)
from domain.entities.chef_profile import (
    ChefProfile,
    Endorsement,
    ProfileViolation,
    validate_chef_name_update,
    validate_endorsement_note,
    validate_profile_fields,
    validate_recipe_collection,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ChefProfileService:
    """Service layer for ChefProfile business logic.

    Every mutating method is scoped to ``owner_id``, the identity of the
    caller as resolved by the host. Reads accept any identity.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(
        self,
        owner_id: UUID,
        chef_name: str,
        experience_level: int,
        cuisine_specialties: Sequence[str],
        signature_dishes: Sequence[str],
        recipe_collection: Sequence[str],
    ) -> ChefProfile:
        """Create the caller's profile. Fails if one already exists."""
        async with self._uow_factory() as uow:
            if await uow.profiles.exists(owner_id):
                raise ProfileAlreadyExistsError(str(owner_id))

            self._require_valid(
                "profile",
                validate_profile_fields(
                    chef_name,
                    experience_level,
                    cuisine_specialties,
                    signature_dishes,
                    recipe_collection,
                ),
                owner_id,
            )

            profile = ChefProfile(
                owner_id=owner_id,
                chef_name=chef_name,
                experience_level=experience_level,
                cuisine_specialties=list(cuisine_specialties),
                signature_dishes=list(signature_dishes),
                recipe_collection=list(recipe_collection),
            )

            try:
                created = await uow.profiles.create(profile)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # A concurrent create won the race on the primary key.
                if _is_duplicate_key(exc):
                    raise ProfileAlreadyExistsError(str(owner_id)) from exc
                raise

            logger.info("profile_created", owner_id=str(owner_id))
            return created

    async def modify(
        self,
        owner_id: UUID,
        chef_name: str,
        experience_level: int,
        cuisine_specialties: Sequence[str],
        signature_dishes: Sequence[str],
        recipe_collection: Sequence[str],
    ) -> ChefProfile:
        """Replace every field of the caller's existing profile."""
        async with self._uow_factory() as uow:
            profile = await self._get_or_raise(uow, owner_id)

            self._require_valid(
                "profile",
                validate_profile_fields(
                    chef_name,
                    experience_level,
                    cuisine_specialties,
                    signature_dishes,
                    recipe_collection,
                ),
                owner_id,
            )

            profile.replace_fields(
                chef_name,
                experience_level,
                cuisine_specialties,
                signature_dishes,
                recipe_collection,
            )
            updated = await self._update_or_raise(uow, profile)
            await uow.commit()
            logger.info("profile_modified", owner_id=str(owner_id))
            return updated

    async def delete(self, owner_id: UUID) -> bool:
        """Remove the caller's profile entirely."""
        async with self._uow_factory() as uow:
            await self._get_or_raise(uow, owner_id)

            deleted = await uow.profiles.delete(owner_id)
            await uow.commit()
            logger.info("profile_deleted", owner_id=str(owner_id))
            return deleted

    async def update_name(self, owner_id: UUID, chef_name: str) -> ChefProfile:
        """Rename the caller's profile, leaving every other field untouched."""
        async with self._uow_factory() as uow:
            profile = await self._get_or_raise(uow, owner_id)
            self._require_valid("name", validate_chef_name_update(chef_name), owner_id)

            profile.chef_name = chef_name
            profile.touch()
            updated = await self._update_or_raise(uow, profile)
            await uow.commit()
            logger.info("profile_name_updated", owner_id=str(owner_id))
            return updated

    async def upgrade_recipe_collection(
        self, owner_id: UUID, recipe_collection: Sequence[str]
    ) -> ChefProfile:
        """Replace only the recipe collection of the caller's profile."""
        async with self._uow_factory() as uow:
            profile = await self._get_or_raise(uow, owner_id)
            self._require_valid(
                "recipe", validate_recipe_collection(recipe_collection), owner_id
            )

            profile.recipe_collection = list(recipe_collection)
            profile.touch()
            updated = await self._update_or_raise(uow, profile)
            await uow.commit()
            logger.info(
                "profile_recipes_upgraded",
                owner_id=str(owner_id),
                recipe_count=len(profile.recipe_collection),
            )
            return updated

    async def restore_from_backup(
        self,
        owner_id: UUID,
        chef_name: str,
        experience_level: int,
        cuisine_specialties: Sequence[str],
        signature_dishes: Sequence[str],
        recipe_collection: Sequence[str],
    ) -> ChefProfile:
        """Upsert the caller's profile from a full set of fields.

        Creates the record when absent and overwrites it when present;
        callers cannot tell the two cases apart.
        """
        self._require_valid(
            "profile",
            validate_profile_fields(
                chef_name,
                experience_level,
                cuisine_specialties,
                signature_dishes,
                recipe_collection,
            ),
            owner_id,
        )

        backup = ChefProfile(
            owner_id=owner_id,
            chef_name=chef_name,
            experience_level=experience_level,
            cuisine_specialties=list(cuisine_specialties),
            signature_dishes=list(signature_dishes),
            recipe_collection=list(recipe_collection),
        )

        async with self._uow_factory() as uow:
            try:
                restored, overwritten = await self._upsert(uow, backup)
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                if not _is_duplicate_key(exc):
                    raise
                # A concurrent restore inserted first; overwrite its row.
                logger.info("profile_restore_retried", owner_id=str(owner_id))
                restored, overwritten = await self._upsert(uow, backup)
                await uow.commit()

            logger.info(
                "profile_restored",
                owner_id=str(owner_id),
                overwritten=overwritten,
            )
            return restored

    async def get_profile(self, owner_id: UUID) -> ChefProfile:
        """Get any identity's full profile."""
        async with self._uow_factory() as uow:
            return await self._get_or_raise(uow, owner_id)

    async def get_cuisine_specialties(self, owner_id: UUID) -> List[str]:
        async with self._uow_factory() as uow:
            profile = await self._get_or_raise(uow, owner_id)
            return list(profile.cuisine_specialties)

    async def get_signature_dishes(self, owner_id: UUID) -> List[str]:
        async with self._uow_factory() as uow:
            profile = await self._get_or_raise(uow, owner_id)
            return list(profile.signature_dishes)

    async def get_recipe_collection(self, owner_id: UUID) -> List[str]:
        async with self._uow_factory() as uow:
            profile = await self._get_or_raise(uow, owner_id)
            return list(profile.recipe_collection)

    async def endorse_chef(
        self, caller_id: UUID, target_id: UUID, note: str
    ) -> Endorsement:
        """Check that ``caller_id`` may endorse ``target_id``.

        Both identities must own a profile and differ, and the note must
        not be blank. The endorsement is logged but not stored.
        """
        if caller_id == target_id:
            raise SelfEndorsementError()
        self._require_valid("note", validate_endorsement_note(note), caller_id)

        async with self._uow_factory() as uow:
            if not await uow.profiles.exists(caller_id):
                raise ProfileNotFoundError(str(caller_id))
            if not await uow.profiles.exists(target_id):
                raise ProfileNotFoundError(str(target_id))

        logger.info(
            "chef_endorsed",
            endorser_id=str(caller_id),
            chef_id=str(target_id),
        )
        return Endorsement(endorser_id=caller_id, chef_id=target_id, note=note)

    async def _get_or_raise(self, uow: IUnitOfWork, owner_id: UUID) -> ChefProfile:
        """Load a profile or raise ProfileNotFoundError."""
        profile = await uow.profiles.get(owner_id)
        if not profile:
            raise ProfileNotFoundError(str(owner_id))
        return profile

    async def _update_or_raise(
        self, uow: IUnitOfWork, profile: ChefProfile
    ) -> ChefProfile:
        """Persist a loaded profile; the row may have been deleted since it was read."""
        updated = await uow.profiles.update(profile)
        if updated is None:
            raise ProfileNotFoundError(str(profile.owner_id))
        return updated

    async def _upsert(
        self, uow: IUnitOfWork, backup: ChefProfile
    ) -> Tuple[ChefProfile, bool]:
        """Write ``backup`` over the stored row, inserting it when absent."""
        existing = await uow.profiles.get(backup.owner_id)
        if existing is None:
            return await uow.profiles.create(backup), False

        existing.replace_fields(
            backup.chef_name,
            backup.experience_level,
            backup.cuisine_specialties,
            backup.signature_dishes,
            backup.recipe_collection,
        )
        return await self._update_or_raise(uow, existing), True

    def _require_valid(
        self, field: str, violations: List[ProfileViolation], owner_id: UUID
    ) -> None:
        if violations:
            logger.info(
                "profile_validation_failed",
                owner_id=str(owner_id),
                field=field,
                violations=[v.value for v in violations],
            )
            raise InvalidProfileInputError(field, violations)


def _is_duplicate_key(exc: IntegrityError) -> bool:
    orig = str(exc.orig).lower() if exc.orig else ""
    return "unique" in orig or "duplicate" in orig
