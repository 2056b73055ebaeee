"""
Unit tests for AutoAssigner.
"""

from collections import defaultdict

import pytest

from techdispatch.application.services.auto_assigner import (
    AssignmentState,
    AutoAssigner,
)
from techdispatch.application.services.scorer import AssignmentScorer
from techdispatch.application.services.suggestion_ranker import SuggestionRanker
from techdispatch.domain.entities.assignment import NO_SUITABLE_TECH


class TestAutoAssigner:
    """Test cases for AutoAssigner."""

    @pytest.fixture
    def assigner(self, test_settings):
        scorer = AssignmentScorer(settings=test_settings)
        return AutoAssigner(ranker=SuggestionRanker(scorer=scorer))

    @staticmethod
    def _hours_by_tech(result):
        hours = defaultdict(float)
        for outcome in result.successful:
            hours[outcome.tech_id] += outcome.job.duration_hours
        return hours

    def test_two_half_days_fit_one_tech(self, assigner, make_tech, make_job, tuesday):
        jobs = [make_job(f"j{i}", estimated_duration="4 hours") for i in range(2)]
        result = assigner.auto_assign(jobs, [make_tech()], [], tuesday)

        assert result.summary.total == 2
        assert result.summary.assigned == 2
        assert all(a.tech_id == "tech-a" for a in result.assignments)

    def test_third_half_day_fails(self, assigner, make_tech, make_job, tuesday):
        jobs = [make_job(f"j{i}", estimated_duration="4 hours") for i in range(3)]
        result = assigner.auto_assign(jobs, [make_tech()], [], tuesday)

        assert result.summary.assigned == 2
        assert result.summary.unassigned == 1
        failed = result.failed[0]
        assert failed.job_id == "j2"
        assert failed.tech_id is None
        assert failed.warnings == [NO_SUITABLE_TECH]

    def test_second_tech_absorbs_overflow(self, assigner, make_tech, make_job, tuesday):
        jobs = [make_job(f"j{i}", estimated_duration="4 hours") for i in range(3)]
        techs = [make_tech("tech-a", "Tech A"), make_tech("tech-b", "Tech B")]
        result = assigner.auto_assign(jobs, techs, [], tuesday)

        assert result.summary.assigned == 3
        assert [a.tech_id for a in result.assignments] == ["tech-a", "tech-b", "tech-a"]
        assert all(hours <= 8 for hours in self._hours_by_tech(result).values())

    def test_longest_jobs_first(self, assigner, make_tech, make_job, tuesday):
        jobs = [
            make_job("short", estimated_duration=30),
            make_job("medium", estimated_duration="2 hours"),
            make_job("long", estimated_duration="1 day"),
        ]
        result = assigner.auto_assign(jobs, [make_tech()], [], tuesday)

        assert [a.job_id for a in result.assignments] == ["long", "medium", "short"]

    def test_equal_durations_keep_input_order(self, make_job):
        jobs = [make_job(f"j{i}", estimated_duration=60) for i in range(5)]
        assert [j.id for j in AutoAssigner.order_jobs(jobs)] == [
            "j0",
            "j1",
            "j2",
            "j3",
            "j4",
        ]

    def test_max_jobs_never_exceeded(self, assigner, make_tech, make_job, tuesday):
        jobs = [make_job(f"j{i}", estimated_duration=30) for i in range(6)]
        result = assigner.auto_assign(jobs, [make_tech()], [], tuesday)

        assert result.summary.assigned == 4
        assert result.summary.unassigned == 2

    def test_existing_assignments_count(self, assigner, make_tech, make_job, tuesday):
        existing = [
            make_job(f"e{i}", estimated_duration=30, assigned_tech_id="tech-a")
            for i in range(4)
        ]
        techs = [make_tech("tech-a", "Tech A"), make_tech("tech-b", "Tech B")]
        result = assigner.auto_assign([make_job("new")], techs, existing, tuesday)

        assert result.assignments[0].tech_id == "tech-b"

    def test_no_double_booking(self, assigner, make_tech, make_job, tuesday):
        jobs = [
            make_job("j1", scheduled_time="09:00", estimated_duration=60),
            make_job("j2", scheduled_time="09:00", estimated_duration=60),
        ]
        single = assigner.auto_assign(jobs, [make_tech()], [], tuesday)
        assert single.summary.assigned == 1
        assert single.failed[0].job_id == "j2"

        techs = [make_tech("tech-a", "Tech A"), make_tech("tech-b", "Tech B")]
        pair = assigner.auto_assign(jobs, techs, [], tuesday)
        assert [a.tech_id for a in pair.assignments] == ["tech-a", "tech-b"]

    def test_non_positive_scores_are_not_assigned(
        self, assigner, make_tech, make_job, saturday
    ):
        tech = make_tech(skills=["Plumbing"])
        job = make_job(scheduled_date=saturday)
        result = assigner.auto_assign([job], [tech], [], saturday)

        assert result.summary.unassigned == 1
        assert result.assignments[0].failed is True

    def test_successful_outcome_carries_ranking(self, assigner, make_tech, make_job, tuesday):
        result = assigner.auto_assign([make_job()], [make_tech()], [], tuesday)
        outcome = result.assignments[0]

        assert outcome.failed is False
        assert outcome.tech_name == "Tech A"
        assert outcome.score == 170
        assert outcome.reasons[0] == "Has HVAC skills"

    def test_empty_backlog(self, assigner, make_tech, tuesday):
        result = assigner.auto_assign([], [make_tech()], [], tuesday)
        assert result.assignments == []
        assert result.summary.total == 0

    def test_step_extends_working_set(self, assigner, make_tech, make_job, tuesday):
        state = AssignmentState()
        job = make_job()
        next_state = assigner.step(state, job, [make_tech()], tuesday)

        assert len(next_state.outcomes) == 1
        assert next_state.working_set[0].assigned_tech_id == "tech-a"
        assert job.assigned_tech_id is None
        assert state.outcomes == ()

    def test_failed_step_leaves_working_set(self, assigner, make_job, tuesday):
        state = AssignmentState()
        next_state = assigner.step(state, make_job(), [], tuesday)

        assert next_state.outcomes[0].failed is True
        assert next_state.working_set == ()
