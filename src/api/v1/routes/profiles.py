"""Chef profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_chef_profile_service
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.profile import (
    ChefNameUpdate,
    ChefProfileCreate,
    ChefProfileDetailResponse,
    ChefProfileMutationResponse,
    ChefProfileReplace,
    ChefProfileResponse,
    ChefProfileRestore,
    EndorsementCreate,
    ProfileItemsResponse,
    RecipeCollectionUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.chef_profile_service import ChefProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


# --- Caller's own profile ---


@router.post(
    "/me",
    response_model=ChefProfileMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create your profile",
    responses={
        201: {"description": "Profile created successfully"},
        400: {"description": "A field failed validation"},
        409: {"description": "You already have a profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ChefProfileCreate,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ChefProfileMutationResponse:
    """Create the caller's chef profile. Each identity may own one."""
    profile = await service.create(
        owner_id=user.id,
        chef_name=body.chef_name,
        experience_level=body.experience_level,
        cuisine_specialties=body.cuisine_specialties,
        signature_dishes=body.signature_dishes,
        recipe_collection=body.recipe_collection,
    )
    return ChefProfileMutationResponse(
        message="Profile created successfully",
        data=ChefProfileResponse.from_entity(profile),
    )


@router.put(
    "/me",
    response_model=ChefProfileMutationResponse,
    summary="Replace your profile",
    responses={
        200: {"description": "Profile modified successfully"},
        400: {"description": "A field failed validation"},
        404: {"description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def modify_profile(
    request: Request,
    body: ChefProfileReplace,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ChefProfileMutationResponse:
    """Replace every field of the caller's existing profile."""
    profile = await service.modify(
        owner_id=user.id,
        chef_name=body.chef_name,
        experience_level=body.experience_level,
        cuisine_specialties=body.cuisine_specialties,
        signature_dishes=body.signature_dishes,
        recipe_collection=body.recipe_collection,
    )
    return ChefProfileMutationResponse(
        message="Profile modified successfully",
        data=ChefProfileResponse.from_entity(profile),
    )


@router.delete(
    "/me",
    response_model=MessageResponse,
    summary="Delete your profile",
    responses={
        200: {"description": "Profile deleted successfully"},
        404: {"description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> MessageResponse:
    """Permanently delete the caller's profile."""
    await service.delete(user.id)
    return MessageResponse(message="Profile deleted successfully")


@router.patch(
    "/me/name",
    response_model=ChefProfileMutationResponse,
    summary="Rename your profile",
    responses={
        200: {"description": "Name updated successfully"},
        400: {"description": "Name is empty, too short or too long"},
        404: {"description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_profile_name(
    request: Request,
    body: ChefNameUpdate,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ChefProfileMutationResponse:
    """Change only the chef name."""
    profile = await service.update_name(user.id, body.chef_name)
    return ChefProfileMutationResponse(
        message="Name updated successfully",
        data=ChefProfileResponse.from_entity(profile),
    )


@router.put(
    "/me/recipes",
    response_model=ChefProfileMutationResponse,
    summary="Replace your recipe collection",
    responses={
        200: {"description": "Recipe collection upgraded successfully"},
        400: {"description": "Collection must hold between 1 and 5 recipes"},
        404: {"description": "You have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upgrade_recipe_collection(
    request: Request,
    body: RecipeCollectionUpdate,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ChefProfileMutationResponse:
    """Change only the recipe collection."""
    profile = await service.upgrade_recipe_collection(user.id, body.recipe_collection)
    return ChefProfileMutationResponse(
        message="Recipe collection upgraded successfully",
        data=ChefProfileResponse.from_entity(profile),
    )


@router.post(
    "/me/restore",
    response_model=ChefProfileMutationResponse,
    summary="Restore your profile from a backup",
    responses={
        200: {"description": "Profile restored successfully"},
        400: {"description": "A field failed validation"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def restore_profile(
    request: Request,
    body: ChefProfileRestore,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ChefProfileMutationResponse:
    """Create or overwrite the caller's profile from a full backup."""
    profile = await service.restore_from_backup(
        owner_id=user.id,
        chef_name=body.chef_name,
        experience_level=body.experience_level,
        cuisine_specialties=body.cuisine_specialties,
        signature_dishes=body.signature_dishes,
        recipe_collection=body.recipe_collection,
    )
    return ChefProfileMutationResponse(
        message="Profile restored successfully",
        data=ChefProfileResponse.from_entity(profile),
    )


# --- Public reads ---


@router.get(
    "/me",
    response_model=ChefProfileDetailResponse,
    summary="Get your profile",
    responses={404: {"description": "You have no profile"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_own_profile(
    request: Request,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ChefProfileDetailResponse:
    """Get the caller's own profile. Registered before ``/{owner_id}``."""
    profile = await service.get_profile(user.id)
    return ChefProfileDetailResponse(data=ChefProfileResponse.from_entity(profile))


@router.get(
    "/{owner_id}",
    response_model=ChefProfileDetailResponse,
    summary="Get a profile",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    owner_id: UUID,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ChefProfileDetailResponse:
    """Get any chef's full profile."""
    profile = await service.get_profile(owner_id)
    return ChefProfileDetailResponse(data=ChefProfileResponse.from_entity(profile))


@router.get(
    "/{owner_id}/cuisine-specialties",
    response_model=ProfileItemsResponse,
    summary="Get a chef's cuisine specialties",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_cuisine_specialties(
    request: Request,
    owner_id: UUID,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ProfileItemsResponse:
    return ProfileItemsResponse(data=await service.get_cuisine_specialties(owner_id))


@router.get(
    "/{owner_id}/signature-dishes",
    response_model=ProfileItemsResponse,
    summary="Get a chef's signature dishes",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_signature_dishes(
    request: Request,
    owner_id: UUID,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ProfileItemsResponse:
    return ProfileItemsResponse(data=await service.get_signature_dishes(owner_id))


@router.get(
    "/{owner_id}/recipes",
    response_model=ProfileItemsResponse,
    summary="Get a chef's recipe collection",
    responses={404: {"description": "Profile not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_recipe_collection(
    request: Request,
    owner_id: UUID,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> ProfileItemsResponse:
    return ProfileItemsResponse(data=await service.get_recipe_collection(owner_id))


@router.post(
    "/{owner_id}/endorsements",
    response_model=MessageResponse,
    summary="Endorse a chef",
    responses={
        200: {"description": "Endorsement accepted (not stored)"},
        400: {"description": "Empty note or self endorsement"},
        404: {"description": "You or the chef have no profile"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def endorse_chef(
    request: Request,
    owner_id: UUID,
    body: EndorsementCreate,
    user: CurrentUser,
    service: ChefProfileService = Depends(get_chef_profile_service),
) -> MessageResponse:
    """Endorse another chef. Endorsements are checked but not recorded."""
    await service.endorse_chef(user.id, owner_id, body.note)
    return MessageResponse(message="Chef endorsed successfully")
