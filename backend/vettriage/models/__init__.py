"""Pydantic models for VetTriage."""

from .pet import PetProfile, PetProfileBase, PetProfileCreate, new_id
from .triage import (
    SymptomSeverity,
    BadgeStyle,
    VitalKind,
    VitalReading,
    TriageStage,
    TriageIntake,
    TriageState,
    StageUpdate,
    PetSelection,
    SeverityUpdate,
    NotesUpdate,
    VitalsToggle,
    RunRequest,
    DiagnosisStatus,
    DiagnosisSummary,
    DiagnosticResult,
    KeySignal,
    timestamp_label
)
from .resource import CareTip, Resource, ResourceSection

__all__ = [
    # Pet
    "PetProfile", "PetProfileBase", "PetProfileCreate", "new_id",
    # Triage
    "SymptomSeverity", "BadgeStyle", "VitalKind", "VitalReading",
    "TriageStage", "TriageIntake", "TriageState",
    "StageUpdate", "PetSelection", "SeverityUpdate", "NotesUpdate", "VitalsToggle", "RunRequest",
    # Diagnosis
    "DiagnosisStatus", "DiagnosisSummary", "DiagnosticResult", "KeySignal", "timestamp_label",
    # Resources
    "Resource", "ResourceSection", "CareTip"
]
