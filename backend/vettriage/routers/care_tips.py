"""
Care tip API routes (read-only).
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from ..models.resource import CareTip
from ..services.resource_service import CareTipCatalog
from ..store import get_care_tips

router = APIRouter(prefix="/care-tips", tags=["Care Tips"])


@router.get("/", response_model=List[CareTip])
async def list_care_tips(
    category: Optional[str] = Query(None, description="Filter by category, e.g. Hydration"),
    catalog: CareTipCatalog = Depends(get_care_tips)
):
    return catalog.list(category)


@router.get("/{tip_id}", response_model=CareTip)
async def get_care_tip(tip_id: str, catalog: CareTipCatalog = Depends(get_care_tips)):
    return catalog.get(tip_id)
