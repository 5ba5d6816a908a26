"""
Triage workflow and diagnosis models.
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum, IntEnum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .pet import new_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SymptomSeverity(IntEnum):
    """Ordinal symptom intensity captured at intake."""
    NONE = 0
    MILD = 1
    MODERATE = 2
    HIGH = 3
    EMERGENCY = 4

    @property
    def label(self) -> str:
        return _SEVERITY_LABELS[self]

    @property
    def risk_weight(self) -> float:
        """Base-risk weight in [0, 1]: none=0.0 up to emergency=1.0."""
        return self.value / float(SymptomSeverity.EMERGENCY.value)


_SEVERITY_LABELS = {
    SymptomSeverity.NONE: "No notable issues",
    SymptomSeverity.MILD: "Mild",
    SymptomSeverity.MODERATE: "Moderate",
    SymptomSeverity.HIGH: "High",
    SymptomSeverity.EMERGENCY: "Emergency",
}


class BadgeStyle(str, Enum):
    """Display badge style."""
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


class VitalKind(str, Enum):
    """Vital signs streamed by the wearable."""
    HEART_RATE = "heart_rate"
    RESPIRATION = "respiration"
    TEMPERATURE = "temperature"


class VitalReading(BaseModel):
    """Single vital measurement with its derived status badge."""
    model_config = ConfigDict(frozen=True)

    name: str
    details: str = ""
    badge: str = ""
    status: BadgeStyle = BadgeStyle.INFO
    kind: Optional[VitalKind] = None
    value: Optional[float] = None
    unit: Optional[str] = None


class TriageStage(IntEnum):
    """Workflow stages, in display order."""
    INTAKE = 0
    VITALS = 1
    SUMMARY = 2

    @property
    def label(self) -> str:
        return self.name.title()


class TriageIntake(BaseModel):
    """Frozen snapshot of a workflow run handed to the classifier."""
    model_config = ConfigDict(frozen=True)

    pet_id: str
    pet_name: str
    severity: SymptomSeverity = SymptomSeverity.MODERATE
    notes: str = ""
    include_vitals: bool = True
    submitted_at: datetime = Field(default_factory=utcnow)


class DiagnosisStatus(str, Enum):
    """Triage outcome."""
    STABLE = "stable"
    MONITOR = "monitor"
    URGENT = "urgent"

    @property
    def label(self) -> str:
        return self.value.title()

    @property
    def badge_style(self) -> BadgeStyle:
        if self is DiagnosisStatus.STABLE:
            return BadgeStyle.SUCCESS
        return BadgeStyle.WARNING


def timestamp_label(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Relative display label such as "20 min ago" or "Yesterday"."""
    now = now or utcnow()
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    seconds = max(0.0, (now - created_at).total_seconds())

    if seconds < 60:
        return "Just now"
    minutes = int(seconds // 60)
    if minutes < 60:
        return f"{minutes} min ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hr ago"
    days = hours // 24
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    return created_at.strftime("%b %d, %Y")


class DiagnosisSummary(BaseModel):
    """One completed analysis, as listed under recent analyses."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    pet_name: str
    brief: str
    created_at: datetime = Field(default_factory=utcnow)
    status: DiagnosisStatus
    notes: List[str] = []

    @computed_field
    @property
    def timestamp(self) -> str:
        return timestamp_label(self.created_at)

    @computed_field
    @property
    def badge_style(self) -> BadgeStyle:
        return self.status.badge_style


class KeySignal(BaseModel):
    """Per-vital contribution shown next to a diagnostic result."""
    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str = ""
    description: str = ""
    percentage: float = Field(..., ge=0, le=1)
    status: str
    badge_style: BadgeStyle = BadgeStyle.INFO


class DiagnosticResult(BaseModel):
    """Classifier output for one triage run."""
    model_config = ConfigDict(frozen=True)

    primary_condition: str
    confidence: float = Field(..., ge=0, le=1)
    description: str
    next_steps: List[str] = []
    summary: DiagnosisSummary
    signals: List[KeySignal] = []

    @computed_field
    @property
    def confidence_percent(self) -> int:
        """Confidence as a whole percentage, halves rounded up."""
        percent = Decimal(str(self.confidence)) * 100
        return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class TriageState(BaseModel):
    """Read-only view of a workflow for display."""
    session_id: str
    stage: TriageStage
    stage_label: str
    pet_id: Optional[str] = None
    pet_name: Optional[str] = None
    severity: SymptomSeverity
    severity_label: str
    notes: str = ""
    include_vitals: bool = True
    issues: List[str] = []
    last_result: Optional[DiagnosticResult] = None


class StageUpdate(BaseModel):
    """Move a session to another stage."""
    stage: int = Field(..., description="0=Intake, 1=Vitals, 2=Summary")


class PetSelection(BaseModel):
    pet_id: str


class SeverityUpdate(BaseModel):
    severity: int = Field(..., description="0=None through 4=Emergency")


class NotesUpdate(BaseModel):
    notes: str = ""


class VitalsToggle(BaseModel):
    include_vitals: bool


class RunRequest(BaseModel):
    """Run analysis, optionally with live vitals instead of the wearable feed."""
    vitals: Optional[List[VitalReading]] = None
