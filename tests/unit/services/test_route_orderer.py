"""
Unit tests for RouteOrderer.
"""

import pytest

from techdispatch.application.services.route_orderer import RouteOrderer
from techdispatch.domain.value_objects.location import Coordinates


class TestRouteOrderer:
    """Test cases for RouteOrderer."""

    @pytest.fixture
    def orderer(self, test_settings):
        return RouteOrderer(settings=test_settings)

    @pytest.fixture
    def located(self, make_job):
        def _make(job_id, lat, lng, **overrides):
            return make_job(job_id, coordinates=Coordinates(lat=lat, lng=lng), **overrides)

        return _make

    def test_nearest_neighbor_from_home(self, orderer, located):
        jobs = [located("far", 5, 5), located("near", 1, 1), located("mid", 3, 3)]
        ordered = orderer.order_route(jobs, Coordinates(lat=0, lng=0))
        assert [j.id for j in ordered] == ["near", "mid", "far"]

    def test_without_home_base_starts_with_first_job(self, orderer, located):
        jobs = [located("a", 5, 5), located("b", 1, 1), located("c", 4, 4)]
        ordered = orderer.order_route(jobs)
        assert [j.id for j in ordered] == ["a", "c", "b"]

    def test_jobs_without_coordinates_keep_order(self, orderer, make_job):
        jobs = [make_job("x"), make_job("y"), make_job("z")]
        ordered = orderer.order_route(jobs, Coordinates(lat=0, lng=0))
        assert [j.id for j in ordered] == ["x", "y", "z"]

    def test_mixed_coordinates(self, orderer, located, make_job):
        jobs = [located("a", 2, 2), make_job("b"), located("c", 1, 1)]
        ordered = orderer.order_route(jobs, Coordinates(lat=0, lng=0))
        # "b" has no coordinates, so the first remaining job is taken
        assert [j.id for j in ordered] == ["a", "b", "c"]

    def test_is_a_permutation(self, orderer, located):
        jobs = [located(f"j{i}", (i * 7) % 5, (i * 3) % 4) for i in range(8)]
        ordered = orderer.order_route(jobs, Coordinates(lat=0, lng=0))
        assert sorted(j.id for j in ordered) == sorted(j.id for j in jobs)

    def test_trivial_routes(self, orderer, make_job):
        assert orderer.order_route([]) == []
        job = make_job()
        assert orderer.order_route([job]) == [job]

    def test_schedule_route_with_travel(self, orderer, make_tech, located, tuesday):
        tech = make_tech()
        jobs = [
            located("a", 30.27, -97.74, estimated_duration=60),
            located("b", 30.27, -97.74, estimated_duration=60),
        ]
        plan = orderer.schedule_route(tech, jobs, tuesday)

        assert plan.job_ids == ["a", "b"]
        first, second = plan.stops
        assert (first.start_time, first.end_time) == ("08:00", "09:00")
        # same spot still costs the minimum travel time
        assert first.travel_minutes_to_next == 15
        assert (second.start_time, second.end_time) == ("09:15", "10:15")
        assert plan.total_travel_minutes == 15

    def test_schedule_route_distance_based_travel(
        self, orderer, make_tech, located, tuesday
    ):
        # one degree of latitude is about 69 miles, 138 minutes at 30mph
        jobs = [located("a", 30.0, -97.0), located("b", 31.0, -97.0)]
        plan = orderer.schedule_route(make_tech(), jobs, tuesday)
        assert plan.stops[0].travel_minutes_to_next == 138

    def test_schedule_route_without_coordinates(self, orderer, make_tech, make_job, tuesday):
        jobs = [make_job("a", estimated_duration=60), make_job("b", estimated_duration=60)]
        plan = orderer.schedule_route(make_tech(), jobs, tuesday)

        assert [(s.start_time, s.end_time) for s in plan.stops] == [
            ("08:00", "09:00"),
            ("09:00", "10:00"),
        ]
        assert plan.total_travel_minutes == 0

    def test_schedule_route_uses_tech_home_base(self, orderer, make_tech, located, tuesday):
        tech = make_tech(home_base=Coordinates(lat=0, lng=0))
        jobs = [located("far", 5, 5), located("near", 1, 1)]
        plan = orderer.schedule_route(tech, jobs, tuesday)
        assert plan.job_ids == ["near", "far"]

    def test_schedule_route_default_start(self, orderer, make_tech, make_job, saturday):
        plan = orderer.schedule_route(make_tech(), [make_job()], saturday)
        assert plan.stops[0].start_time == "08:00"
