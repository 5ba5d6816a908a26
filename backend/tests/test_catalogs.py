"""Tests for the analysis history and the resource and care tip catalogs."""

import pytest

from vettriage.exceptions import NotFoundError
from vettriage.models import DiagnosisStatus, DiagnosisSummary
from vettriage.seed import mock_analyses, mock_care_tips, mock_resources
from vettriage.services.history_service import AnalysisHistory
from vettriage.services.resource_service import CareTipCatalog, ResourceCatalog


def summary(name):
    return DiagnosisSummary(pet_name=name, brief=f"{name} checked", status=DiagnosisStatus.STABLE)


class TestAnalysisHistory:
    def test_most_recent_first(self):
        history = AnalysisHistory()
        for name in ["Luna", "Atlas", "Nova"]:
            history.record(summary(name))
        assert [s.pet_name for s in history.list()] == ["Nova", "Atlas", "Luna"]

    def test_seeded_history(self):
        history = AnalysisHistory(summaries=mock_analyses())
        assert [s.pet_name for s in history.list()] == ["Luna", "Atlas", "Nova"]
        assert [s.timestamp for s in history.list()] == ["20 min ago", "1 hr ago", "Yesterday"]

    def test_unbounded_by_default(self):
        history = AnalysisHistory()
        for i in range(250):
            history.record(summary(f"pet-{i}"))
        assert len(history) == 250

    def test_limit_evicts_oldest(self):
        history = AnalysisHistory(limit=2)
        for name in ["Luna", "Atlas", "Nova"]:
            history.record(summary(name))
        assert [s.pet_name for s in history.list()] == ["Nova", "Atlas"]

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            AnalysisHistory(limit=0)

    def test_list_limit(self):
        history = AnalysisHistory(summaries=mock_analyses())
        assert len(history.list(limit=1)) == 1

    def test_get(self):
        history = AnalysisHistory()
        recorded = history.record(summary("Luna"))
        assert history.get(recorded.id) == recorded
        with pytest.raises(NotFoundError):
            history.get("missing")


class TestResourceCatalog:
    def test_list_in_load_order(self):
        catalog = ResourceCatalog(mock_resources())
        titles = [r.title for r in catalog.list()]
        assert titles == ["Post-operative respiratory care", "GI distress stabilization"]

    def test_get(self):
        catalog = ResourceCatalog(mock_resources())
        first = catalog.list()[0]
        resource = catalog.get(first.id)
        assert resource.sections[0].title == "Immediate care"
        assert len(resource.sections[0].points) == 2

    def test_get_unknown(self):
        with pytest.raises(NotFoundError):
            ResourceCatalog(mock_resources()).get("missing")

    def test_empty_catalog(self):
        assert ResourceCatalog().list() == []


class TestCareTipCatalog:
    def test_list_in_load_order(self):
        catalog = CareTipCatalog(mock_care_tips())
        assert [t.category for t in catalog.list()] == ["Hydration", "Mobility", "Nutrition"]

    def test_filter_by_category_ignores_case(self):
        catalog = CareTipCatalog(mock_care_tips())
        assert [t.title for t in catalog.list("nutrition")] == ["High-protein snacks"]
        assert catalog.list("Grooming") == []

    def test_get(self):
        catalog = CareTipCatalog(mock_care_tips())
        first = catalog.list()[0]
        assert catalog.get(first.id).title == "Monitor fluid intake"

    def test_get_unknown(self):
        with pytest.raises(NotFoundError):
            CareTipCatalog(mock_care_tips()).get("missing")
