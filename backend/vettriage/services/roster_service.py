"""
Pet roster service.

The roster owns the canonical list of pet profiles. Callers only ever see
copies, and editors work on detached drafts until they call add/update.
"""

import math
import threading
from typing import Iterator, List, Optional

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import NotFoundError, ValidationError
from ..models.pet import PetProfile


class PetRoster:
    """In-memory, insertion-ordered pet roster."""

    def __init__(self, pets: Optional[List[PetProfile]] = None):
        self._lock = threading.Lock()
        self._pets: tuple = ()
        for pet in pets or []:
            self.add(pet)

    @staticmethod
    def _validate(profile: PetProfile) -> PetProfile:
        """Check the savable-profile invariants and return a validated copy."""
        try:
            profile = PetProfile.model_validate(profile.model_dump(warnings=False))
        except PydanticValidationError as exc:
            issues = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ]
            raise ValidationError("; ".join(issues), issues)

        issues = []
        if not profile.name or not profile.name.strip():
            issues.append("Pet name is required")
        if not profile.species or not profile.species.strip():
            issues.append("Species is required")
        if profile.weight:
            try:
                weight = float(profile.weight)
            except ValueError:
                weight = None
            if weight is None or not math.isfinite(weight) or weight < 0:
                issues.append(f"Weight must be a non-negative number, got {profile.weight!r}")
        if issues:
            raise ValidationError("; ".join(issues), issues)
        return profile

    def list(self) -> List[PetProfile]:
        """All profiles, in insertion order."""
        return [pet.model_copy(deep=True) for pet in self._pets]

    def get(self, pet_id: str) -> PetProfile:
        """Get a copy of the profile with this id."""
        for pet in self._pets:
            if pet.id == pet_id:
                return pet.model_copy(deep=True)
        raise NotFoundError(f"Pet {pet_id} not found")

    def add(self, profile: PetProfile) -> PetProfile:
        """Append a new profile."""
        stored = self._validate(profile)
        
        with self._lock:
            if any(pet.id == stored.id for pet in self._pets):
                raise ValidationError(f"Pet {stored.id} already exists")
            self._pets = self._pets + (stored,)
        
        return stored.model_copy(deep=True)

    def update(self, profile: PetProfile) -> PetProfile:
        """Replace the whole record whose id matches."""
        stored = self._validate(profile)
        
        with self._lock:
            ids = [pet.id for pet in self._pets]
            if stored.id not in ids:
                raise NotFoundError(f"Pet {stored.id} not found")
            index = ids.index(stored.id)
            self._pets = self._pets[:index] + (stored,) + self._pets[index + 1:]
        
        return stored.model_copy(deep=True)

    def remove(self, pet_id: str) -> bool:
        """Remove a profile. Unknown ids are ignored."""
        with self._lock:
            remaining = tuple(pet for pet in self._pets if pet.id != pet_id)
            removed = len(remaining) != len(self._pets)
            self._pets = remaining
        return removed

    def new_draft(self) -> PetProfile:
        """Empty editor draft with a fresh id."""
        return PetProfile.empty()

    def edit_draft(self, pet_id: str) -> PetProfile:
        """Detached editor draft of an existing profile."""
        return self.get(pet_id)

    def __len__(self) -> int:
        return len(self._pets)

    def __contains__(self, pet_id: object) -> bool:
        return any(pet.id == pet_id for pet in self._pets)

    def __iter__(self) -> Iterator[PetProfile]:
        return iter(self.list())
