"""Shared fixtures: fresh in-memory services per test."""

import pytest
from fastapi.testclient import TestClient

from vettriage.main import app
from vettriage.seed import mock_pets
from vettriage.services.classifier_service import ScoringClassifier
from vettriage.services.history_service import AnalysisHistory
from vettriage.services.roster_service import PetRoster
from vettriage.services.triage_service import TriageWorkflow


@pytest.fixture
def roster():
    return PetRoster(mock_pets())


@pytest.fixture
def luna(roster):
    return roster.list()[0]


@pytest.fixture
def history():
    return AnalysisHistory()


@pytest.fixture
def classifier():
    return ScoringClassifier()


@pytest.fixture
def workflow(roster, classifier, history):
    return TriageWorkflow(roster, classifier, history)


@pytest.fixture
def client():
    # Entering the context runs the lifespan, which reseeds the store
    with TestClient(app) as test_client:
        yield test_client
