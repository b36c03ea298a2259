"""Pydantic schemas for ChefProfile API.

Request bodies only enforce JSON shape. Field rules (lengths, ranges,
list sizes) are enforced by the domain so that every rule failure is
reported as INVALID_PROFILE_INPUT.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.chef_profile import ChefProfile


class ChefProfileFields(BaseModel):
    """Full set of caller-supplied profile fields."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "chef_name": "Chef Ana",
                "experience_level": 5,
                "cuisine_specialties": ["Italian"],
                "signature_dishes": ["Lasagna"],
                "recipe_collection": ["Carbonara"],
            }
        },
    )

    chef_name: str
    experience_level: int = Field(..., ge=0)
    cuisine_specialties: list[str]
    signature_dishes: list[str]
    recipe_collection: list[str]


class ChefProfileCreate(ChefProfileFields):
    """Schema for creating a profile."""


class ChefProfileReplace(ChefProfileFields):
    """Schema for replacing every field of a profile."""


class ChefProfileRestore(ChefProfileFields):
    """Schema for restoring a profile from a backup."""


class ChefNameUpdate(BaseModel):
    """Schema for renaming a profile."""

    chef_name: str


class RecipeCollectionUpdate(BaseModel):
    """Schema for replacing the recipe collection."""

    recipe_collection: list[str]


class EndorsementCreate(BaseModel):
    """Schema for endorsing another chef."""

    note: str


class ChefProfileResponse(BaseModel):
    """Schema for ChefProfile response."""

    model_config = ConfigDict(from_attributes=True)

    owner_id: UUID
    chef_name: str
    experience_level: int
    cuisine_specialties: list[str]
    signature_dishes: list[str]
    recipe_collection: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: ChefProfile) -> "ChefProfileResponse":
        return cls.model_validate(profile)


class ChefProfileDetailResponse(BaseModel):
    """Schema for a single profile."""

    data: ChefProfileResponse


class ChefProfileMutationResponse(BaseModel):
    """Confirmation plus the profile as committed."""

    message: str
    data: ChefProfileResponse


class ProfileItemsResponse(BaseModel):
    """Schema for a single list field of a profile."""

    data: list[str]
