"""
Guided triage workflow service.

A TriageWorkflow walks a single run through the Intake -> Vitals -> Summary
stages. Stages can be visited in any order; the intake is validated when the
Summary stage is entered and again, strictly, when the analysis is run.
"""

import threading
from typing import Callable, Dict, List, Optional, Sequence

from ..exceptions import NotFoundError, ValidationError
from ..models.pet import PetProfile, new_id
from ..models.triage import (
    DiagnosticResult,
    SymptomSeverity,
    TriageIntake,
    TriageStage,
    TriageState,
    VitalReading
)
from .classifier_service import Classifier
from .history_service import AnalysisHistory
from .roster_service import PetRoster
from .vitals_service import mock_stream

VitalsSource = Callable[[], Sequence[VitalReading]]


class TriageWorkflow:
    """State for one guided triage run."""

    def __init__(
        self,
        roster: PetRoster,
        classifier: Classifier,
        history: Optional[AnalysisHistory] = None,
        vitals_source: VitalsSource = mock_stream,
        select_first_pet: bool = False
    ):
        self.id = new_id()
        self.roster = roster
        self.classifier = classifier
        self.history = history
        self.vitals_source = vitals_source

        self.stage = TriageStage.INTAKE
        self.pet_id: Optional[str] = None
        self.severity = SymptomSeverity.MODERATE
        self.notes = ""
        self.include_vitals = True
        self.issues: List[str] = []
        self.last_result: Optional[DiagnosticResult] = None

        if select_first_pet:
            pets = roster.list()
            if pets:
                self.pet_id = pets[0].id

    # Navigation

    def go_to(self, stage) -> TriageState:
        """Jump to any stage. Entering Summary refreshes the validation issues."""
        try:
            target = TriageStage(stage)
        except (ValueError, TypeError):
            raise ValidationError(f"Unknown workflow stage: {stage!r}")

        self.stage = target
        if target == TriageStage.SUMMARY:
            self.issues = self.validate()
        return self.state()

    # Intake

    def select_pet(self, pet_id: str) -> None:
        if pet_id not in self.roster:
            raise ValidationError(f"Unknown pet: {pet_id}")
        self.pet_id = pet_id

    def set_severity(self, level) -> None:
        if isinstance(level, bool):
            raise ValidationError(f"Invalid symptom severity: {level!r}")
        try:
            self.severity = SymptomSeverity(level)
        except (ValueError, TypeError):
            raise ValidationError(
                f"Symptom severity must be between {SymptomSeverity.NONE.value} "
                f"and {SymptomSeverity.EMERGENCY.value}, got {level!r}"
            )

    def set_notes(self, text: str) -> None:
        if not isinstance(text, str):
            raise ValidationError("Observation notes must be text")
        self.notes = text

    def set_include_vitals(self, include: bool) -> None:
        if not isinstance(include, bool):
            raise ValidationError("include_vitals must be true or false")
        self.include_vitals = include

    # Validation and run

    def _selected_pet(self) -> Optional[PetProfile]:
        if self.pet_id is None:
            return None
        try:
            return self.roster.get(self.pet_id)
        except NotFoundError:
            return None

    def validate(self) -> List[str]:
        """List what still blocks a run. Never raises."""
        issues = []
        if self.pet_id is None:
            issues.append("Select a pet before running analysis")
        elif self._selected_pet() is None:
            issues.append("Selected pet is no longer in the roster")
        return issues

    def snapshot(self) -> TriageIntake:
        """Freeze the current intake."""
        issues = self.validate()
        pet = self._selected_pet()
        if issues or pet is None:
            raise ValidationError("Triage intake is incomplete", issues)

        return TriageIntake(
            pet_id=pet.id,
            pet_name=pet.name,
            severity=self.severity,
            notes=self.notes,
            include_vitals=self.include_vitals
        )

    def run(self, vitals: Optional[Sequence[VitalReading]] = None) -> DiagnosticResult:
        """Validate, freeze the intake and classify it."""
        intake = self.snapshot()

        if vitals is not None:
            readings = list(vitals)
        elif intake.include_vitals:
            readings = list(self.vitals_source())
        else:
            readings = []

        result = self.classifier.classify(intake, readings)

        if self.history is not None:
            self.history.record(result.summary)
        self.issues = []
        self.last_result = result
        return result

    def state(self) -> TriageState:
        pet = self._selected_pet()
        return TriageState(
            session_id=self.id,
            stage=self.stage,
            stage_label=self.stage.label,
            pet_id=self.pet_id,
            pet_name=pet.name if pet else None,
            severity=self.severity,
            severity_label=self.severity.label,
            notes=self.notes,
            include_vitals=self.include_vitals,
            issues=list(self.issues),
            last_result=self.last_result
        )


class TriageSessionRegistry:
    """Open triage workflows keyed by session id.

    When max_sessions is set, creating a session past the cap drops the
    oldest open one.
    """

    def __init__(
        self,
        factory: Callable[[], TriageWorkflow],
        max_sessions: Optional[int] = None
    ):
        if max_sessions is not None and max_sessions < 1:
            raise ValidationError(f"max_sessions must be at least 1, got {max_sessions}")
        self._factory = factory
        self.max_sessions = max_sessions
        self._lock = threading.Lock()
        self._sessions: Dict[str, TriageWorkflow] = {}

    def create(self) -> TriageWorkflow:
        workflow = self._factory()
        with self._lock:
            self._sessions[workflow.id] = workflow
            if self.max_sessions is not None:
                while len(self._sessions) > self.max_sessions:
                    del self._sessions[next(iter(self._sessions))]
        return workflow

    def get(self, session_id: str) -> TriageWorkflow:
        workflow = self._sessions.get(session_id)
        if workflow is None:
            raise NotFoundError(f"Triage session {session_id} not found")
        return workflow

    def discard(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
