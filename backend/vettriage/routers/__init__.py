"""Routers package for VetTriage API."""

from .pets import router as pets_router
from .triage import router as triage_router
from .analyses import router as analyses_router
from .resources import router as resources_router
from .care_tips import router as care_tips_router

__all__ = [
    "pets_router",
    "triage_router",
    "analyses_router",
    "resources_router",
    "care_tips_router"
]
