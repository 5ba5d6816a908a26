"""Tests for the guided triage workflow."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from vettriage.exceptions import NotFoundError, ValidationError
from vettriage.models import DiagnosisStatus, SymptomSeverity, TriageStage
from vettriage.services.classifier_service import MockClassifier
from vettriage.services.triage_service import TriageSessionRegistry, TriageWorkflow
from vettriage.services.vitals_service import mock_stream


class TestDefaults:
    def test_initial_state(self, workflow):
        state = workflow.state()
        assert state.stage == TriageStage.INTAKE
        assert state.pet_id is None
        assert state.severity == SymptomSeverity.MODERATE
        assert state.severity_label == "Moderate"
        assert state.include_vitals is True
        assert state.notes == ""
        assert state.last_result is None

    def test_select_first_pet(self, roster, classifier, luna):
        workflow = TriageWorkflow(roster, classifier, select_first_pet=True)
        assert workflow.pet_id == luna.id
        assert workflow.state().pet_name == "Luna"

    def test_select_first_pet_with_empty_roster(self, classifier):
        from vettriage.services.roster_service import PetRoster
        workflow = TriageWorkflow(PetRoster(), classifier, select_first_pet=True)
        assert workflow.pet_id is None


class TestNavigation:
    def test_free_navigation(self, workflow):
        workflow.go_to(TriageStage.VITALS)
        assert workflow.stage == TriageStage.VITALS
        workflow.go_to(0)
        assert workflow.stage == TriageStage.INTAKE

    def test_summary_before_intake_reports_issues(self, workflow):
        state = workflow.go_to(TriageStage.SUMMARY)
        assert state.stage == TriageStage.SUMMARY
        assert state.issues == ["Select a pet before running analysis"]

    def test_summary_with_complete_intake_has_no_issues(self, workflow, luna):
        workflow.select_pet(luna.id)
        assert workflow.go_to(TriageStage.SUMMARY).issues == []

    def test_unknown_stage(self, workflow):
        with pytest.raises(ValidationError):
            workflow.go_to(7)
        assert workflow.stage == TriageStage.INTAKE


class TestIntake:
    def test_select_pet(self, workflow, luna):
        workflow.select_pet(luna.id)
        assert workflow.state().pet_name == "Luna"

    def test_select_unknown_pet(self, workflow):
        with pytest.raises(ValidationError):
            workflow.select_pet("missing")
        assert workflow.pet_id is None

    def test_set_severity(self, workflow):
        workflow.set_severity(SymptomSeverity.HIGH)
        assert workflow.severity == SymptomSeverity.HIGH
        workflow.set_severity(4)
        assert workflow.severity == SymptomSeverity.EMERGENCY

    @pytest.mark.parametrize("level", [5, -1, 2.5, "high", None, True])
    def test_invalid_severity(self, workflow, level):
        with pytest.raises(ValidationError):
            workflow.set_severity(level)
        assert workflow.severity == SymptomSeverity.MODERATE

    def test_set_notes(self, workflow):
        workflow.set_notes("Coughing " * 500)
        assert workflow.notes.startswith("Coughing")

    def test_notes_must_be_text(self, workflow):
        with pytest.raises(ValidationError):
            workflow.set_notes(42)

    def test_set_include_vitals(self, workflow):
        workflow.set_include_vitals(False)
        assert workflow.include_vitals is False

    def test_include_vitals_must_be_bool(self, workflow):
        with pytest.raises(ValidationError):
            workflow.set_include_vitals("no")
        assert workflow.include_vitals is True


class TestRun:
    def test_wearable_scenario(self, workflow, luna, history):
        workflow.select_pet(luna.id)
        workflow.set_severity(SymptomSeverity.MODERATE)
        workflow.set_include_vitals(True)

        result = workflow.run()

        assert result.confidence >= 0.5
        assert result.summary.status != DiagnosisStatus.STABLE
        assert result.summary.pet_name == "Luna"
        assert history.list()[0] == result.summary
        assert workflow.state().last_result == result

    def test_run_without_pet_fails_without_changes(self, workflow, roster, history):
        roster_before = roster.list()
        state_before = workflow.state()

        with pytest.raises(ValidationError) as exc:
            workflow.run()

        assert exc.value.issues == ["Select a pet before running analysis"]
        assert roster.list() == roster_before
        assert workflow.state() == state_before
        assert len(history) == 0

    def test_run_fails_when_pet_removed(self, workflow, roster, luna):
        workflow.select_pet(luna.id)
        roster.remove(luna.id)
        with pytest.raises(ValidationError) as exc:
            workflow.run()
        assert "no longer in the roster" in exc.value.issues[0]

    def test_run_does_not_mutate_roster(self, workflow, roster, luna):
        before = roster.list()
        workflow.select_pet(luna.id)
        workflow.run()
        assert roster.list() == before

    def test_excluded_vitals_skip_the_feed(self, roster, classifier, luna):
        calls = []

        def feed():
            calls.append(1)
            return mock_stream()

        workflow = TriageWorkflow(roster, classifier, vitals_source=feed)
        workflow.select_pet(luna.id)
        workflow.set_include_vitals(False)
        result = workflow.run()

        assert calls == []
        assert result.confidence == pytest.approx(0.5)
        assert "excluded" in result.description

    def test_included_vitals_read_the_feed(self, roster, classifier, luna):
        calls = []

        def feed():
            calls.append(1)
            return mock_stream()

        workflow = TriageWorkflow(roster, classifier, vitals_source=feed)
        workflow.select_pet(luna.id)
        workflow.run()
        assert calls == [1]

    def test_explicit_vitals_override_feed(self, workflow, luna):
        workflow.select_pet(luna.id)
        result = workflow.run(vitals=[])
        assert "no vitals were received" in result.description

    def test_snapshot_is_frozen(self, workflow, luna):
        workflow.select_pet(luna.id)
        workflow.set_notes("Wheezing")
        intake = workflow.snapshot()
        assert intake.pet_name == "Luna"
        assert intake.notes == "Wheezing"
        with pytest.raises(PydanticValidationError):
            intake.notes = "changed"

    def test_run_clears_summary_issues(self, workflow, luna):
        workflow.go_to(TriageStage.SUMMARY)
        workflow.select_pet(luna.id)
        workflow.run()
        assert workflow.state().issues == []

    def test_run_without_history(self, roster, luna):
        workflow = TriageWorkflow(roster, MockClassifier())
        workflow.select_pet(luna.id)
        assert workflow.run().confidence == 0.78


class TestSessionRegistry:
    def _registry(self, roster, classifier):
        return TriageSessionRegistry(lambda: TriageWorkflow(roster, classifier))

    def test_create_and_get(self, roster, classifier):
        registry = self._registry(roster, classifier)
        workflow = registry.create()
        assert registry.get(workflow.id) is workflow
        assert len(registry) == 1

    def test_sessions_are_independent(self, roster, classifier):
        registry = self._registry(roster, classifier)
        first, second = registry.create(), registry.create()
        first.set_notes("first only")
        assert second.notes == ""

    def test_get_unknown(self, roster, classifier):
        with pytest.raises(NotFoundError):
            self._registry(roster, classifier).get("missing")

    def test_discard(self, roster, classifier):
        registry = self._registry(roster, classifier)
        workflow = registry.create()
        assert registry.discard(workflow.id) is True
        assert registry.discard(workflow.id) is False
        with pytest.raises(NotFoundError):
            registry.get(workflow.id)

    def test_cap_drops_oldest_session(self, roster, classifier):
        registry = TriageSessionRegistry(lambda: TriageWorkflow(roster, classifier), max_sessions=2)
        first, second, third = registry.create(), registry.create(), registry.create()
        assert len(registry) == 2
        with pytest.raises(NotFoundError):
            registry.get(first.id)
        assert registry.get(second.id) is second
        assert registry.get(third.id) is third

    def test_unbounded_without_cap(self, roster, classifier):
        registry = self._registry(roster, classifier)
        for _ in range(50):
            registry.create()
        assert len(registry) == 50

    def test_invalid_cap(self, roster, classifier):
        with pytest.raises(ValidationError):
            TriageSessionRegistry(lambda: TriageWorkflow(roster, classifier), max_sessions=0)
