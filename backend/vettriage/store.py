"""
In-memory application store.
Holds the roster, analysis history, catalogs and triage sessions.
"""

from typing import Optional

from .config import get_settings
from .seed import mock_analyses, mock_care_tips, mock_pets, mock_resources
from .services.classifier_service import Classifier, build_classifier
from .services.history_service import AnalysisHistory
from .services.resource_service import CareTipCatalog, ResourceCatalog
from .services.roster_service import PetRoster
from .services.triage_service import TriageSessionRegistry, TriageWorkflow

settings = get_settings()


class Store:
    """Process-wide in-memory store."""
    
    roster: Optional[PetRoster] = None
    history: Optional[AnalysisHistory] = None
    resources: Optional[ResourceCatalog] = None
    care_tips: Optional[CareTipCatalog] = None
    classifier: Optional[Classifier] = None
    sessions: Optional[TriageSessionRegistry] = None
    
    @classmethod
    def connect(cls, seed: Optional[bool] = None):
        """Build the store, seeding mock data unless disabled."""
        if seed is None:
            seed = settings.SEED_MOCK_DATA
        
        cls.roster = PetRoster(mock_pets() if seed else None)
        cls.history = AnalysisHistory(
            limit=settings.RECENT_ANALYSES_LIMIT,
            summaries=mock_analyses() if seed else None
        )
        cls.resources = ResourceCatalog(mock_resources() if seed else None)
        cls.care_tips = CareTipCatalog(mock_care_tips() if seed else None)
        cls.classifier = build_classifier(settings)
        cls.sessions = TriageSessionRegistry(
            cls.new_workflow,
            max_sessions=settings.MAX_TRIAGE_SESSIONS
        )
        
        print(f"Store ready: {len(cls.roster)} pets, {len(cls.history)} analyses, "
              f"{len(cls.resources)} resources, {len(cls.care_tips)} care tips, "
              f"classifier={cls.classifier.name}")
    
    @classmethod
    def disconnect(cls):
        """Drop all in-memory state."""
        cls.roster = None
        cls.history = None
        cls.resources = None
        cls.care_tips = None
        cls.classifier = None
        cls.sessions = None
        print("Store cleared")
    
    @classmethod
    def new_workflow(cls) -> TriageWorkflow:
        """Workflow bound to the store's roster, classifier and history."""
        cls._require()
        return TriageWorkflow(
            roster=cls.roster,
            classifier=cls.classifier,
            history=cls.history,
            select_first_pet=settings.SESSION_SELECT_FIRST_PET
        )
    
    @classmethod
    def _require(cls):
        if cls.roster is None:
            raise RuntimeError("Store not connected")


# Dependencies for FastAPI routes
def _connected():
    if Store.roster is None:
        Store.connect()
    return Store


def get_roster() -> PetRoster:
    return _connected().roster


def get_history() -> AnalysisHistory:
    return _connected().history


def get_resources() -> ResourceCatalog:
    return _connected().resources


def get_care_tips() -> CareTipCatalog:
    return _connected().care_tips


def get_sessions() -> TriageSessionRegistry:
    return _connected().sessions
