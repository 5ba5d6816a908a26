"""
Care resource API routes (read-only).
"""

from typing import List
from fastapi import APIRouter, Depends

from ..models.resource import Resource
from ..services.resource_service import ResourceCatalog
from ..store import get_resources

router = APIRouter(prefix="/resources", tags=["Resources"])


@router.get("/", response_model=List[Resource])
async def list_resources(catalog: ResourceCatalog = Depends(get_resources)):
    return catalog.list()


@router.get("/{resource_id}", response_model=Resource)
async def get_resource(resource_id: str, catalog: ResourceCatalog = Depends(get_resources)):
    return catalog.get(resource_id)
