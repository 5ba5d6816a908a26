"""
Clinical resource (care guideline and care tip) models.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List

from .pet import new_id


class ResourceSection(BaseModel):
    """Titled group of guideline points."""
    model_config = ConfigDict(frozen=True)

    title: str
    points: List[str] = []


class Resource(BaseModel):
    """Static care guideline document."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    title: str
    summary: str
    sections: List[ResourceSection] = []


class CareTip(BaseModel):
    """Short home-care tip featured on the dashboard."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    category: str
    title: str
    description: str
