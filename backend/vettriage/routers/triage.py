"""
Guided triage API routes.
One session per triage run; stages can be visited in any order.
"""

from typing import List, Optional
from fastapi import APIRouter, status, Depends, Body

from ..models.triage import (
    DiagnosticResult,
    NotesUpdate,
    PetSelection,
    RunRequest,
    SeverityUpdate,
    StageUpdate,
    SymptomSeverity,
    TriageState,
    VitalReading,
    VitalsToggle
)
from ..services.triage_service import TriageSessionRegistry
from ..services.vitals_service import mock_stream
from ..store import get_sessions

router = APIRouter(prefix="/triage", tags=["Triage"])


@router.get("/severities")
async def list_severities():
    """Severity levels with labels and base-risk weights."""
    return [
        {"value": level.value, "label": level.label, "risk_weight": level.risk_weight}
        for level in SymptomSeverity
    ]


@router.get("/vitals", response_model=List[VitalReading])
async def current_vitals():
    """Current readings from the wearable feed."""
    return mock_stream()


@router.post("/sessions", response_model=TriageState, status_code=status.HTTP_201_CREATED)
async def start_session(sessions: TriageSessionRegistry = Depends(get_sessions)):
    """Start a new triage run."""
    return sessions.create().state()


@router.get("/sessions/{session_id}", response_model=TriageState)
async def get_session(session_id: str, sessions: TriageSessionRegistry = Depends(get_sessions)):
    return sessions.get(session_id).state()


@router.put("/sessions/{session_id}/stage", response_model=TriageState)
async def change_stage(
    session_id: str,
    update: StageUpdate,
    sessions: TriageSessionRegistry = Depends(get_sessions)
):
    """Navigate to a stage. Entering Summary reports outstanding issues."""
    return sessions.get(session_id).go_to(update.stage)


@router.put("/sessions/{session_id}/pet", response_model=TriageState)
async def select_pet(
    session_id: str,
    selection: PetSelection,
    sessions: TriageSessionRegistry = Depends(get_sessions)
):
    workflow = sessions.get(session_id)
    workflow.select_pet(selection.pet_id)
    return workflow.state()


@router.put("/sessions/{session_id}/severity", response_model=TriageState)
async def set_severity(
    session_id: str,
    update: SeverityUpdate,
    sessions: TriageSessionRegistry = Depends(get_sessions)
):
    workflow = sessions.get(session_id)
    workflow.set_severity(update.severity)
    return workflow.state()


@router.put("/sessions/{session_id}/notes", response_model=TriageState)
async def set_notes(
    session_id: str,
    update: NotesUpdate,
    sessions: TriageSessionRegistry = Depends(get_sessions)
):
    workflow = sessions.get(session_id)
    workflow.set_notes(update.notes)
    return workflow.state()


@router.put("/sessions/{session_id}/include-vitals", response_model=TriageState)
async def set_include_vitals(
    session_id: str,
    update: VitalsToggle,
    sessions: TriageSessionRegistry = Depends(get_sessions)
):
    workflow = sessions.get(session_id)
    workflow.set_include_vitals(update.include_vitals)
    return workflow.state()


@router.post("/sessions/{session_id}/run", response_model=DiagnosticResult)
async def run_analysis(
    session_id: str,
    request: Optional[RunRequest] = Body(None),
    sessions: TriageSessionRegistry = Depends(get_sessions)
):
    """Validate the intake and classify it."""
    vitals = request.vitals if request else None
    return sessions.get(session_id).run(vitals)


@router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_session(session_id: str, sessions: TriageSessionRegistry = Depends(get_sessions)):
    sessions.get(session_id)
    sessions.discard(session_id)
