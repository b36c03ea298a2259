"""Chef profile domain entity and field rules."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Sequence
from uuid import UUID

MIN_EXPERIENCE_LEVEL = 2
MAX_EXPERIENCE_LEVEL = 75

MAX_CHEF_NAME_LENGTH = 100
MIN_UPDATED_NAME_LENGTH = 3

MAX_SPECIALTIES = 10
MAX_SPECIALTY_LENGTH = 50
MAX_DISHES = 5
MAX_RECIPES = 5
MAX_ITEM_LENGTH = 100


class ProfileViolation(StrEnum):
    """A single broken field rule."""

    EMPTY_NAME = "EMPTY_NAME"
    NAME_TOO_SHORT = "NAME_TOO_SHORT"
    NAME_TOO_LONG = "NAME_TOO_LONG"
    EXPERIENCE_OUT_OF_RANGE = "EXPERIENCE_OUT_OF_RANGE"
    EMPTY_SPECIALTIES = "EMPTY_SPECIALTIES"
    TOO_MANY_SPECIALTIES = "TOO_MANY_SPECIALTIES"
    SPECIALTY_TOO_LONG = "SPECIALTY_TOO_LONG"
    EMPTY_DISHES = "EMPTY_DISHES"
    TOO_MANY_DISHES = "TOO_MANY_DISHES"
    DISH_TOO_LONG = "DISH_TOO_LONG"
    EMPTY_RECIPES = "EMPTY_RECIPES"
    TOO_MANY_RECIPES = "TOO_MANY_RECIPES"
    RECIPE_TOO_LONG = "RECIPE_TOO_LONG"
    EMPTY_NOTE = "EMPTY_NOTE"


@dataclass
class ChefProfile:
    """Domain entity for a chef's culinary profile, keyed by its owner."""

    owner_id: UUID
    chef_name: str
    experience_level: int
    cuisine_specialties: list[str] = field(default_factory=list)
    signature_dishes: list[str] = field(default_factory=list)
    recipe_collection: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Copy list fields so callers cannot mutate stored state by reference."""
        self.cuisine_specialties = list(self.cuisine_specialties)
        self.signature_dishes = list(self.signature_dishes)
        self.recipe_collection = list(self.recipe_collection)
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    def replace_fields(
        self,
        chef_name: str,
        experience_level: int,
        cuisine_specialties: Sequence[str],
        signature_dishes: Sequence[str],
        recipe_collection: Sequence[str],
    ) -> None:
        """Overwrite every validated field; owner_id and created_at stay."""
        self.chef_name = chef_name
        self.experience_level = experience_level
        self.cuisine_specialties = list(cuisine_specialties)
        self.signature_dishes = list(signature_dishes)
        self.recipe_collection = list(recipe_collection)
        self.touch()

    def touch(self) -> None:
        self.updated_at = datetime.utcnow()


@dataclass(frozen=True, slots=True)
class Endorsement:
    """Read-only value object describing an accepted endorsement.

    Nothing is stored; the object only confirms the checks passed.
    """

    endorser_id: UUID
    chef_id: UUID
    note: str


def _check_items(
    items: Sequence[str],
    max_count: int,
    max_length: int,
    empty: ProfileViolation,
    too_many: ProfileViolation,
    too_long: ProfileViolation,
) -> list[ProfileViolation]:
    violations: list[ProfileViolation] = []
    if not items:
        violations.append(empty)
    elif len(items) > max_count:
        violations.append(too_many)
    if any(len(item) > max_length for item in items):
        violations.append(too_long)
    return violations


def _is_blank(text: str) -> bool:
    return not text or not text.strip()


def _check_name(name: str) -> list[ProfileViolation]:
    if _is_blank(name):
        return [ProfileViolation.EMPTY_NAME]
    if len(name) > MAX_CHEF_NAME_LENGTH:
        return [ProfileViolation.NAME_TOO_LONG]
    return []


def validate_profile_fields(
    chef_name: str,
    experience_level: int,
    cuisine_specialties: Sequence[str],
    signature_dishes: Sequence[str],
    recipe_collection: Sequence[str],
) -> list[ProfileViolation]:
    """Check all five profile fields and return every violation found.

    An empty list means the fields may be committed as a whole record.
    """
    violations = _check_name(chef_name)
    if not MIN_EXPERIENCE_LEVEL <= experience_level <= MAX_EXPERIENCE_LEVEL:
        violations.append(ProfileViolation.EXPERIENCE_OUT_OF_RANGE)
    violations += _check_items(
        cuisine_specialties,
        MAX_SPECIALTIES,
        MAX_SPECIALTY_LENGTH,
        ProfileViolation.EMPTY_SPECIALTIES,
        ProfileViolation.TOO_MANY_SPECIALTIES,
        ProfileViolation.SPECIALTY_TOO_LONG,
    )
    violations += _check_items(
        signature_dishes,
        MAX_DISHES,
        MAX_ITEM_LENGTH,
        ProfileViolation.EMPTY_DISHES,
        ProfileViolation.TOO_MANY_DISHES,
        ProfileViolation.DISH_TOO_LONG,
    )
    violations += validate_recipe_collection(recipe_collection)
    return violations


def validate_chef_name_update(chef_name: str) -> list[ProfileViolation]:
    """Rules for renaming an existing profile (stricter minimum length)."""
    violations = _check_name(chef_name)
    if not violations and len(chef_name.strip()) < MIN_UPDATED_NAME_LENGTH:
        violations.append(ProfileViolation.NAME_TOO_SHORT)
    return violations


def validate_endorsement_note(note: str) -> list[ProfileViolation]:
    return [ProfileViolation.EMPTY_NOTE] if _is_blank(note) else []


def validate_recipe_collection(recipe_collection: Sequence[str]) -> list[ProfileViolation]:
    return _check_items(
        recipe_collection,
        MAX_RECIPES,
        MAX_ITEM_LENGTH,
        ProfileViolation.EMPTY_RECIPES,
        ProfileViolation.TOO_MANY_RECIPES,
        ProfileViolation.RECIPE_TOO_LONG,
    )
