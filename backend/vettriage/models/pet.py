"""
Pet profile models.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from uuid import uuid4


def new_id() -> str:
    """Generate an opaque unique id."""
    return uuid4().hex


class PetProfileBase(BaseModel):
    """Editable pet profile fields."""
    model_config = ConfigDict(validate_assignment=True)

    name: str = Field("", max_length=100, description="Pet name")
    species: str = Field("", max_length=100)
    age: int = Field(0, ge=0, le=30, description="Age in years")
    weight: Optional[str] = Field(None, description="Weight in kilograms, as entered")
    allergies: str = ""
    notes: Optional[str] = None


class PetProfileCreate(PetProfileBase):
    """Pet creation model."""
    pass


class PetProfile(PetProfileBase):
    """Pet profile with its immutable identity."""
    id: str = Field(default_factory=new_id, frozen=True)

    @classmethod
    def empty(cls) -> "PetProfile":
        """Blank editor template with a fresh id."""
        return cls()
