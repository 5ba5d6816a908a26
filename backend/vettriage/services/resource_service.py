"""
Clinical resource and care tip catalog services (read-only).
"""

from typing import Dict, List, Optional

from ..exceptions import NotFoundError
from ..models.resource import CareTip, Resource


class ResourceCatalog:
    """Static lookup of care guidelines, in load order."""

    def __init__(self, resources: Optional[List[Resource]] = None):
        self._resources: Dict[str, Resource] = {r.id: r for r in resources or []}

    def list(self) -> List[Resource]:
        return list(self._resources.values())

    def get(self, resource_id: str) -> Resource:
        resource = self._resources.get(resource_id)
        if resource is None:
            raise NotFoundError(f"Resource {resource_id} not found")
        return resource

    def __len__(self) -> int:
        return len(self._resources)


class CareTipCatalog:
    """Featured home-care tips, optionally filtered by category."""

    def __init__(self, tips: Optional[List[CareTip]] = None):
        self._tips: Dict[str, CareTip] = {t.id: t for t in tips or []}

    def list(self, category: Optional[str] = None) -> List[CareTip]:
        tips = list(self._tips.values())
        if category:
            wanted = category.strip().lower()
            tips = [t for t in tips if t.category.lower() == wanted]
        return tips

    def get(self, tip_id: str) -> CareTip:
        tip = self._tips.get(tip_id)
        if tip is None:
            raise NotFoundError(f"Care tip {tip_id} not found")
        return tip

    def __len__(self) -> int:
        return len(self._tips)
