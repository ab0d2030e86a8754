import unittest

from tripwise import (
    InputError,
    InvalidCoordinateError,
    InvalidDurationError,
    Milestone,
    TooFewMilestonesError,
    TooManyMilestonesError,
    optimize,
    validate,
)
from tripwise.config import Settings
from tripwise.planner import assemble_route
from tripwise.routing import haversine_distance


def _milestone(mid, lat, lon, duration=0):
    return Milestone(id=mid, name=mid.upper(), coordinates=(lat, lon), estimated_duration=duration)


class TestOptimize(unittest.TestCase):
    def setUp(self):
        self.triangle = [
            _milestone("a", 0.0, 0.0),
            _milestone("b", 0.0, 0.01),
            _milestone("c", 0.01, 0.0),
        ]

    def test_triangle_scenario(self):
        route = optimize(self.triangle)
        self.assertEqual(route.tour_ids, ("a", "b", "c"))
        self.assertEqual(route.starting_point.id, "a")
        self.assertEqual([m.order for m in route.milestones], [0, 1, 2])
        self.assertEqual(len(route.route_segments), 2)
        self.assertAlmostEqual(route.total_distance, 2.68, places=2)
        self.assertTrue(validate(route))

    def test_current_location_biases_start(self):
        route = optimize(self.triangle, current_location=(0.01, 0.0))
        self.assertEqual(route.starting_point.id, "c")
        self.assertEqual(route.tour_ids, ("c", "a", "b"))

    def test_two_milestones(self):
        a = _milestone("a", 0.0, 0.0, duration=10)
        b = _milestone("b", 0.0, 0.01, duration=20)
        route = optimize([a, b])
        self.assertEqual(len(route.route_segments), 1)
        segment = route.route_segments[0]
        direct = haversine_distance(a.coordinates, b.coordinates)
        self.assertAlmostEqual(segment.distance, direct)
        self.assertAlmostEqual(segment.estimated_time, direct / 5.0 * 60)
        # 13.34 min walking plus 30 min of dwell
        self.assertEqual(route.estimated_total_time, 43)
        self.assertEqual(segment.from_milestone.id, "a")
        self.assertEqual(segment.to_milestone.id, "b")

    def test_segments_chain_through_tour(self):
        route = optimize(self.triangle)
        for i, segment in enumerate(route.route_segments):
            self.assertEqual(segment.from_milestone, route.milestones[i])
            self.assertEqual(segment.to_milestone, route.milestones[i + 1])

    def test_milestone_count_limits(self):
        with self.assertRaises(TooFewMilestonesError):
            optimize(self.triangle[:1])
        with self.assertRaises(TooFewMilestonesError):
            optimize([])
        many = [_milestone(str(i), 0.001 * i, 0.0) for i in range(11)]
        with self.assertRaises(TooManyMilestonesError) as ctx:
            optimize(many)
        self.assertEqual(ctx.exception.count, 11)
        self.assertEqual(ctx.exception.limit, 10)
        self.assertIsInstance(ctx.exception, InputError)
        route = optimize(many[:10])
        self.assertEqual(sorted(route.tour_ids), sorted(m.id for m in many[:10]))

    def test_invalid_coordinates(self):
        with self.assertRaises(InvalidCoordinateError):
            optimize([_milestone("a", 91.0, 0.0), _milestone("b", 0.0, 0.0)])
        with self.assertRaises(InvalidCoordinateError):
            optimize(self.triangle, current_location=(0.0, 200.0))

    def test_invalid_duration(self):
        with self.assertRaises(InvalidDurationError):
            optimize([_milestone("a", 0.0, 0.0, duration=-5), _milestone("b", 0.0, 0.01)])

    def test_inputs_not_modified(self):
        milestones = [
            Milestone(id="x", name="X", coordinates=(0.0, 0.0), order=7),
            Milestone(id="y", name="Y", coordinates=(0.0, 0.01), order=3),
        ]
        snapshot = list(milestones)
        route = optimize(milestones)
        self.assertEqual(milestones, snapshot)
        self.assertEqual([m.order for m in milestones], [7, 3])
        self.assertEqual([m.order for m in route.milestones], [0, 1])

    def test_deterministic(self):
        first = optimize(self.triangle, current_location=(0.005, 0.005))
        second = optimize(self.triangle, current_location=(0.005, 0.005))
        self.assertEqual(first, second)

    def test_non_numeric_duration(self):
        for bad in ("ten", None, True):
            with self.assertRaises(InvalidDurationError):
                optimize([_milestone("a", 0.0, 0.0, duration=bad), _milestone("b", 0.0, 0.01)])

    def test_identical_coordinates(self):
        route = optimize([_milestone("a", 1.0, 1.0, 5), _milestone("b", 1.0, 1.0, 5)])
        self.assertEqual(route.total_distance, 0.0)
        self.assertEqual(route.estimated_total_time, 10)

    def test_custom_settings(self):
        fast = Settings(walking_speed_kmh=10.0, max_milestones=3)
        a = _milestone("a", 0.0, 0.0)
        b = _milestone("b", 0.0, 0.01)
        route = optimize([a, b], settings=fast)
        self.assertAlmostEqual(route.route_segments[0].estimated_time, route.route_segments[0].distance * 6)
        with self.assertRaises(TooManyMilestonesError):
            optimize(self.triangle + [_milestone("d", 0.02, 0.0)], settings=fast)


if __name__ == "__main__":
    unittest.main()


class TestAssembleRoute(unittest.TestCase):
    def setUp(self):
        self.a = _milestone("a", 0.0, 0.0)
        self.b = _milestone("b", 0.0, 0.01)

    def test_total_time_rounds_half_up(self):
        # 2.5 minutes of dwell and a zero-length leg
        a = _milestone("a", 0.0, 0.0, duration=2.5)
        route = assemble_route([a, self.b], [0, 1], [[0.0, 0.0], [0.0, 0.0]], 5.0)
        self.assertEqual(route.estimated_total_time, 3)
        # 5 km at 5 km/h is 60 minutes, plus half a minute of dwell
        b = _milestone("b", 0.0, 0.01, duration=0.5)
        route = assemble_route([self.a, b], [0, 1], [[0.0, 5.0], [5.0, 0.0]], 5.0)
        self.assertEqual(route.estimated_total_time, 61)

    def test_total_distance_rounds_half_up(self):
        route = assemble_route([self.a, self.b], [0, 1], [[0.0, 1.125], [1.125, 0.0]], 5.0)
        self.assertEqual(route.total_distance, 1.13)
        self.assertEqual(route.route_segments[0].distance, 1.125)

    def test_follows_tour_order(self):
        route = assemble_route([self.a, self.b], [1, 0], [[0.0, 1.0], [1.0, 0.0]], 5.0)
        self.assertEqual(route.tour_ids, ("b", "a"))
        self.assertEqual(route.starting_point.id, "b")
        self.assertEqual([m.order for m in route.milestones], [0, 1])
        self.assertAlmostEqual(route.route_segments[0].estimated_time, 12.0)
