"""Chef profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.chef_profile import ChefProfile


class IChefProfileRepository(Protocol):
    """Repository interface for ChefProfile entities."""

    async def get(self, owner_id: UUID) -> ChefProfile | None:
        """Get the profile owned by an identity."""
        ...

    async def exists(self, owner_id: UUID) -> bool:
        """Check whether the identity owns a profile."""
        ...

    async def create(self, profile: ChefProfile) -> ChefProfile:
        """Insert a new profile."""
        ...

    async def update(self, profile: ChefProfile) -> ChefProfile | None:
        """Persist every field of an existing profile; None if the row is gone."""
        ...

    async def delete(self, owner_id: UUID) -> bool:
        """Delete a profile and return success status."""
        ...

    async def count(self) -> int:
        """Count stored profiles."""
        ...
