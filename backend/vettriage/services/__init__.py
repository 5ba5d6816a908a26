"""Services package for VetTriage."""

from .roster_service import PetRoster
from .history_service import AnalysisHistory
from .resource_service import CareTipCatalog, ResourceCatalog
from .classifier_service import Classifier, ScoringClassifier, MockClassifier, build_classifier
from .triage_service import TriageWorkflow, TriageSessionRegistry

__all__ = [
    "PetRoster",
    "AnalysisHistory",
    "ResourceCatalog",
    "CareTipCatalog",
    "Classifier",
    "ScoringClassifier",
    "MockClassifier",
    "build_classifier",
    "TriageWorkflow",
    "TriageSessionRegistry"
]
