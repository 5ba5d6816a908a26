"""
Diagnosis classifier service.

Turns a frozen triage intake plus vital readings into a DiagnosticResult.
Two implementations share the Classifier interface:

  * ScoringClassifier blends the severity base-risk weight with the mean
    vital deviation score and classifies the composite into a status.
    Condition labels, next steps and care notes come from fixed catalogs
    keyed by the dominant vital and by status.
  * MockClassifier returns the fixed sample result shown in demos.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..config import Settings
from ..exceptions import ValidationError
from ..models.triage import (
    BadgeStyle,
    DiagnosisStatus,
    DiagnosisSummary,
    DiagnosticResult,
    KeySignal,
    SymptomSeverity,
    TriageIntake,
    VitalKind,
    VitalReading
)
from .vitals_service import deviation_score

# Severity at or above this base risk is always urgent
URGENT_RISK_WEIGHT = SymptomSeverity.HIGH.risk_weight

# Fallback deviation for readings without a measured value, by derived status
STATUS_DEVIATION: Dict[BadgeStyle, float] = {
    BadgeStyle.SUCCESS: 0.0,
    BadgeStyle.INFO: 0.5,
    BadgeStyle.WARNING: 1.0,
}

# Checked in order; the first abnormal kind names the condition
CONDITION_BY_VITAL: List[Tuple[VitalKind, str, str]] = [
    (
        VitalKind.RESPIRATION,
        "Upper respiratory inflammation",
        "Breathing pattern deviates from the resting baseline, consistent with "
        "bronchial inflammation."
    ),
    (
        VitalKind.TEMPERATURE,
        "Febrile response",
        "Body temperature is above the expected range, suggesting an "
        "inflammatory or infectious process."
    ),
    (
        VitalKind.HEART_RATE,
        "Cardiovascular stress response",
        "Resting heart rate is outside the expected range, often secondary to "
        "pain, fever or anxiety."
    ),
]

CONDITION_BY_STATUS: Dict[DiagnosisStatus, Tuple[str, str]] = {
    DiagnosisStatus.STABLE: (
        "No acute condition detected",
        "Reported symptoms and available signals do not point to an acute problem."
    ),
    DiagnosisStatus.MONITOR: (
        "Non-specific symptom cluster",
        "Symptoms warrant observation but do not map to a single condition."
    ),
    DiagnosisStatus.URGENT: (
        "Acute distress",
        "Reported symptom intensity indicates the patient needs prompt clinical attention."
    ),
}

NEXT_STEPS: Dict[DiagnosisStatus, List[str]] = {
    DiagnosisStatus.STABLE: [
        "Continue routine at-home monitoring.",
        "Re-run triage if symptoms change.",
    ],
    DiagnosisStatus.MONITOR: [
        "Schedule in-clinic follow-up within 24 hours.",
        "Re-run vitals after rest and compare trends.",
        "Share observation log with caregiver via the app.",
    ],
    DiagnosisStatus.URGENT: [
        "Contact the clinic immediately.",
        "Flag case for manual specialist review.",
        "Prepare recent medication and allergy history for intake.",
    ],
}

CARE_NOTES: Dict[DiagnosisStatus, List[str]] = {
    DiagnosisStatus.STABLE: [
        "Continue current care plan",
        "Schedule follow-up in 48 hours",
    ],
    DiagnosisStatus.MONITOR: [
        "Recheck vitals within 12 hours",
        "Flag recurrence for deeper scan",
    ],
    DiagnosisStatus.URGENT: [
        "Re-run vitals in clinic",
        "Escalate to on-call veterinarian",
    ],
}


class Classifier(ABC):
    """Diagnosis classifier interface."""

    name = "base"

    @abstractmethod
    def classify(
        self,
        intake: TriageIntake,
        vitals: Sequence[VitalReading] = ()
    ) -> DiagnosticResult:
        """Classify one triage run."""

    @staticmethod
    def _require_intake(intake: Optional[TriageIntake]) -> TriageIntake:
        if intake is None or not intake.pet_id:
            raise ValidationError("A pet must be selected before running analysis")
        return intake


class ScoringClassifier(Classifier):
    """Severity and vitals blend classifier."""

    name = "scoring"

    def __init__(
        self,
        severity_weight: float = 0.5,
        neutral_vital_score: float = 0.5,
        urgent_threshold: float = 0.75,
        monitor_threshold: float = 0.4
    ):
        for label, value in (
            ("severity_weight", severity_weight),
            ("neutral_vital_score", neutral_vital_score),
            ("urgent_threshold", urgent_threshold),
            ("monitor_threshold", monitor_threshold),
        ):
            if not 0.0 <= value <= 1.0:
                raise ValidationError(f"{label} must be within [0, 1], got {value}")
        if monitor_threshold > urgent_threshold:
            raise ValidationError("monitor_threshold cannot exceed urgent_threshold")

        self.severity_weight = severity_weight
        self.neutral_vital_score = neutral_vital_score
        self.urgent_threshold = urgent_threshold
        self.monitor_threshold = monitor_threshold

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScoringClassifier":
        return cls(
            severity_weight=settings.SEVERITY_BLEND_WEIGHT,
            neutral_vital_score=settings.NEUTRAL_VITAL_SCORE,
            urgent_threshold=settings.URGENT_THRESHOLD,
            monitor_threshold=settings.MONITOR_THRESHOLD
        )

    @staticmethod
    def deviation(reading: VitalReading) -> float:
        """Deviation score in [0, 1] for a single reading.

        Measured readings score by their distance from the reference range;
        anything else falls back to its derived status.
        """
        score = deviation_score(reading)
        if score is None:
            return STATUS_DEVIATION.get(reading.status, STATUS_DEVIATION[BadgeStyle.INFO])
        return score

    def vital_score(self, intake: TriageIntake, vitals: Sequence[VitalReading]) -> float:
        """Mean deviation of the vitals, or the neutral score when they are left out."""
        if not intake.include_vitals or not vitals:
            return self.neutral_vital_score
        return float(np.mean([self.deviation(v) for v in vitals]))

    def composite(self, risk: float, vital_score: float) -> float:
        w = self.severity_weight
        return float(np.clip(w * risk + (1.0 - w) * vital_score, 0.0, 1.0))

    def status_for(self, risk: float, composite: float) -> DiagnosisStatus:
        if risk >= URGENT_RISK_WEIGHT or composite >= self.urgent_threshold:
            return DiagnosisStatus.URGENT
        if composite >= self.monitor_threshold:
            return DiagnosisStatus.MONITOR
        return DiagnosisStatus.STABLE

    @staticmethod
    def _abnormal(intake: TriageIntake, vitals: Sequence[VitalReading]) -> List[VitalReading]:
        if not intake.include_vitals:
            return []
        return [v for v in vitals if v.status == BadgeStyle.WARNING]

    def _condition(
        self,
        status: DiagnosisStatus,
        abnormal: List[VitalReading]
    ) -> Tuple[str, str]:
        kinds = {v.kind for v in abnormal}
        for kind, label, description in CONDITION_BY_VITAL:
            if kind in kinds:
                return label, description
        return CONDITION_BY_STATUS[status]

    @staticmethod
    def _vitals_phrase(intake: TriageIntake, vitals: Sequence[VitalReading], abnormal) -> str:
        if not intake.include_vitals:
            return "vitals were excluded from this run"
        if not vitals:
            return "no vitals were received"
        if not abnormal:
            return f"all {len(vitals)} vitals are within target"
        names = ", ".join(v.name for v in abnormal)
        return f"{len(abnormal)} of {len(vitals)} vitals are outside target ({names})"

    def _signals(self, intake: TriageIntake, vitals: Sequence[VitalReading]) -> List[KeySignal]:
        if not intake.include_vitals:
            return []
        signals = []
        for reading in vitals:
            score = self.deviation(reading)
            if reading.status == BadgeStyle.INFO:
                status = "Watch"
            elif score > 0:
                status = "Monitor"
            else:
                status = "Stable"
            signals.append(KeySignal(
                title=reading.name,
                subtitle="Trend deviation",
                description=reading.details,
                percentage=score,
                status=status,
                badge_style=reading.status
            ))
        return signals

    def classify(
        self,
        intake: TriageIntake,
        vitals: Sequence[VitalReading] = ()
    ) -> DiagnosticResult:
        intake = self._require_intake(intake)
        vitals = list(vitals or [])

        risk = intake.severity.risk_weight
        vital_score = self.vital_score(intake, vitals)
        confidence = self.composite(risk, vital_score)
        status = self.status_for(risk, confidence)

        abnormal = self._abnormal(intake, vitals)
        condition, condition_text = self._condition(status, abnormal)
        description = (
            f"{condition_text} Symptom intensity reported as "
            f"{intake.severity.label.lower()}; "
            f"{self._vitals_phrase(intake, vitals, abnormal)}."
        )

        source = "symptoms and vitals" if abnormal else "symptom intake"
        notes = list(CARE_NOTES[status])
        if intake.notes.strip():
            notes.append(f"Owner observations: {intake.notes.strip()}")

        summary = DiagnosisSummary(
            pet_name=intake.pet_name,
            brief=f"{condition} flagged from {source}.",
            status=status,
            notes=notes
        )

        return DiagnosticResult(
            primary_condition=condition,
            confidence=confidence,
            description=description,
            next_steps=list(NEXT_STEPS[status]),
            summary=summary,
            signals=self._signals(intake, vitals)
        )


class MockClassifier(Classifier):
    """Fixed sample result, independent of the intake contents."""

    name = "mock"

    PRIMARY_CONDITION = "Upper respiratory inflammation"
    CONFIDENCE = 0.78
    DESCRIPTION = (
        "AI detected consistent bronchial inflammation patterns similar to "
        "previous cases with positive steroid response."
    )
    NEXT_STEPS = [
        "Schedule in-clinic follow-up within 24 hours.",
        "Share inhaler usage plan with caregiver via the app.",
        "Flag case for manual specialist review.",
    ]
    BRIEF = "Respiratory rate normalized after bronchodilator therapy."
    NOTES = [
        "Continue monitoring at-home inhaler usage",
        "Schedule follow-up in 48 hours",
    ]
    SIGNALS = [
        KeySignal(
            title="Respiration", subtitle="AI confidence",
            description="Breathing stabilized within expected range.",
            percentage=0.82, status="Stable", badge_style=BadgeStyle.SUCCESS
        ),
        KeySignal(
            title="Temperature", subtitle="Trend deviation",
            description="Slight elevation persists, reassess in clinic.",
            percentage=0.64, status="Monitor", badge_style=BadgeStyle.WARNING
        ),
        KeySignal(
            title="Activity", subtitle="Movement index",
            description="Mobility readings suggest mild stiffness after rest.",
            percentage=0.48, status="Watch", badge_style=BadgeStyle.INFO
        ),
    ]

    def classify(
        self,
        intake: TriageIntake,
        vitals: Sequence[VitalReading] = ()
    ) -> DiagnosticResult:
        intake = self._require_intake(intake)
        return DiagnosticResult(
            primary_condition=self.PRIMARY_CONDITION,
            confidence=self.CONFIDENCE,
            description=self.DESCRIPTION,
            next_steps=list(self.NEXT_STEPS),
            summary=DiagnosisSummary(
                pet_name=intake.pet_name,
                brief=self.BRIEF,
                status=DiagnosisStatus.STABLE,
                notes=list(self.NOTES)
            ),
            signals=list(self.SIGNALS)
        )


def build_classifier(settings: Settings) -> Classifier:
    """Create the classifier selected by CLASSIFIER_BACKEND."""
    backend = settings.CLASSIFIER_BACKEND.lower().strip()
    if backend == "scoring":
        return ScoringClassifier.from_settings(settings)
    if backend == "mock":
        return MockClassifier()
    raise ValueError(f"Unknown classifier backend: {settings.CLASSIFIER_BACKEND}")
