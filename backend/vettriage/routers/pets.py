"""
Pet roster API routes.
"""

from typing import List
from fastapi import APIRouter, status, Depends

from ..models.pet import PetProfile, PetProfileCreate
from ..services.roster_service import PetRoster
from ..store import get_roster

router = APIRouter(prefix="/pets", tags=["Pets"])


@router.get("/", response_model=List[PetProfile])
async def list_pets(roster: PetRoster = Depends(get_roster)):
    """List the roster in insertion order."""
    return roster.list()


@router.get("/draft", response_model=PetProfile)
async def new_pet_draft(roster: PetRoster = Depends(get_roster)):
    """Empty editor template with a fresh id."""
    return roster.new_draft()


@router.post("/", response_model=PetProfile, status_code=status.HTTP_201_CREATED)
async def add_pet(
    pet_data: PetProfileCreate,
    roster: PetRoster = Depends(get_roster)
):
    """Add a new pet to the roster."""
    return roster.add(PetProfile(**pet_data.model_dump()))


@router.get("/{pet_id}", response_model=PetProfile)
async def get_pet(pet_id: str, roster: PetRoster = Depends(get_roster)):
    """Get pet by ID."""
    return roster.get(pet_id)


@router.put("/{pet_id}", response_model=PetProfile)
async def update_pet(
    pet_id: str,
    pet_data: PetProfileCreate,
    roster: PetRoster = Depends(get_roster)
):
    """Replace the full pet record."""
    return roster.update(PetProfile(id=pet_id, **pet_data.model_dump()))


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_pet(pet_id: str, roster: PetRoster = Depends(get_roster)):
    """Remove a pet. Unknown ids are ignored."""
    roster.remove(pet_id)
