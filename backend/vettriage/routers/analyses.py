"""
Recent analyses API routes.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from ..models.triage import DiagnosisSummary
from ..services.history_service import AnalysisHistory
from ..store import get_history

router = APIRouter(prefix="/analyses", tags=["Analyses"])


@router.get("/", response_model=List[DiagnosisSummary])
async def recent_analyses(
    limit: Optional[int] = Query(None, ge=1, le=100),
    history: AnalysisHistory = Depends(get_history)
):
    """Recent analyses, most recent first."""
    return history.list(limit)


@router.get("/{summary_id}", response_model=DiagnosisSummary)
async def get_analysis(summary_id: str, history: AnalysisHistory = Depends(get_history)):
    return history.get(summary_id)
