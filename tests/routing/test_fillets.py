"""
Tests for corner fillets
"""

import math
import pytest
from hypothesis import given, strategies as st, settings

from octiline.core.directions import Direction
from octiline.core.geometry import Point
from octiline.core.models import CornerStyle, Waypoint, WaypointRole
from octiline.routing.fillets import build_corners, build_fillet, effective_radius, rounds_bend
from tests.conftest import assert_point_close, assert_parallel


def _path(*points_and_directions):
    """Build waypoints from (point, incoming, outgoing) triples; ends are stations"""
    waypoints = []
    last = len(points_and_directions) - 1
    for i, (point, incoming, outgoing) in enumerate(points_and_directions):
        role = WaypointRole.STATION if i in (0, last) else WaypointRole.BEND
        waypoints.append(Waypoint(point=point, role=role, incoming=incoming, outgoing=outgoing))
    return waypoints


class TestEffectiveRadius:
    """Test suite for effective_radius"""

    @pytest.mark.parametrize('radius,turn,expected', [
        (1.0, 0, 1.0),
        (1.0, 90, 1.5),
        (1.0, -90, 1.5),
        (2.0, 45, 2.5),
        (1.0, 135, 1.75),
    ])
    def test_grows_with_turn(self, radius, turn, expected):
        assert effective_radius(radius, turn) == pytest.approx(expected)


class TestCubicCorners:
    """Test suite for cubic fillets"""

    def test_right_angle(self, right_angle_waypoints):
        fillets = build_corners(right_angle_waypoints, radius=1.0, tightness=0.5)

        assert len(fillets) == 1
        fillet = fillets[0]
        assert fillet.style == CornerStyle.CUBIC
        assert fillet.turn == 90
        assert fillet.trim_distance == pytest.approx(1.5)
        assert_point_close(fillet.start, Point(8.5, 0))
        assert_point_close(fillet.end, Point(10, 1.5))

        c1, c2 = fillet.control_points
        assert_point_close(c1, Point(9.25, 0))
        assert_point_close(c2, Point(10, 0.75))
        assert fillet.arc is None

    def test_default_tightness(self, right_angle_waypoints):
        fillet = build_corners(right_angle_waypoints, radius=1.0)[0]
        c1, _ = fillet.control_points
        assert_point_close(c1, Point(8.5 + 1.5 * 0.55, 0))

    def test_zero_tightness_controls_on_trim_points(self, right_angle_waypoints):
        fillet = build_corners(right_angle_waypoints, radius=1.0, tightness=0)[0]
        assert fillet.control_points == (fillet.start, fillet.end)

    def test_knee_is_kept(self, right_angle_waypoints):
        fillet = build_corners(right_angle_waypoints, radius=1.0)[0]
        assert fillet.knee == Point(10, 0)
        assert rounds_bend(fillet, right_angle_waypoints[1])
        assert not rounds_bend(fillet, right_angle_waypoints[0])

    def test_same_knee_other_turn_not_matched(self, right_angle_waypoints):
        """Test that a second pass through the knee with another turn is a different bend"""
        fillet = build_corners(right_angle_waypoints, radius=1.0)[0]
        other = Waypoint(point=Point(10, 0), role=WaypointRole.BEND,
                         incoming=Direction.WEST, outgoing=Direction.NORTH)
        assert not rounds_bend(fillet, other)


class TestArcCorners:
    """Test suite for arc fillets"""

    def test_right_angle_arc(self, right_angle_waypoints):
        fillet = build_corners(right_angle_waypoints, radius=1.0, style='arc')[0]

        assert fillet.style == CornerStyle.ARC
        assert fillet.control_points is None
        assert_point_close(fillet.arc.center, Point(8.5, 1.5))
        assert fillet.arc.radius == pytest.approx(1.5)
        assert fillet.arc.start_angle == pytest.approx(-90)
        assert fillet.arc.sweep == 90

    def test_left_turn_arc(self):
        """Test that a counter-clockwise turn puts the center on the other side"""
        waypoints = _path(
            (Point(0, 0), None, Direction.EAST),
            (Point(10, 0), Direction.EAST, Direction.NORTH),
            (Point(10, -10), Direction.NORTH, None),
        )
        fillet = build_corners(waypoints, radius=1.0, style=CornerStyle.ARC)[0]

        assert fillet.turn == -90
        assert_point_close(fillet.arc.center, Point(8.5, -1.5))
        assert fillet.arc.sweep == -90

    def test_diagonal_arc_is_tangent(self):
        """Test a 45 degree turn: both trim points lie on the arc"""
        waypoints = _path(
            (Point(0, 0), None, Direction.EAST),
            (Point(10, 0), Direction.EAST, Direction.SOUTHEAST),
            (Point(20, 10), Direction.SOUTHEAST, None),
        )
        fillet = build_corners(waypoints, radius=1.0, style='arc')[0]

        assert fillet.trim_distance == pytest.approx(1.25)
        assert fillet.arc.radius == pytest.approx(1.25 * math.tan(math.radians(67.5)))
        assert fillet.arc.center.distance_to(fillet.start) == pytest.approx(fillet.arc.radius)
        assert fillet.arc.center.distance_to(fillet.end) == pytest.approx(fillet.arc.radius)


class TestClamping:
    """Test suite for trim clamping on short legs"""

    def test_short_leg_clamps(self):
        waypoints = _path(
            (Point(0, 0), None, Direction.EAST),
            (Point(1, 0), Direction.EAST, Direction.SOUTH),
            (Point(1, 10), Direction.SOUTH, None),
        )
        fillet = build_corners(waypoints, radius=2.0)[0]

        assert fillet.trim_distance == pytest.approx(0.5)
        assert_point_close(fillet.start, Point(0.5, 0))
        assert_point_close(fillet.end, Point(1, 0.5))

    def test_shared_leg_trims_meet(self):
        """Test that two knees on a short leg share it without overlapping"""
        waypoints = _path(
            (Point(0, 0), None, Direction.EAST),
            (Point(4, 0), Direction.EAST, Direction.SOUTH),
            (Point(4, 1), Direction.SOUTH, Direction.EAST),
            (Point(10, 1), Direction.EAST, None),
        )
        first, second = build_corners(waypoints, radius=1.0)

        assert_point_close(first.end, Point(4, 0.5))
        assert_point_close(second.start, Point(4, 0.5))

    def test_zero_radius_gives_sharp_corner(self, right_angle_waypoints):
        fillet = build_corners(right_angle_waypoints, radius=0)[0]
        assert fillet.trim_distance == 0
        assert fillet.start == fillet.end == Point(10, 0)


class TestBuildCornersInput:
    """Test suite for build_corners argument handling"""

    def test_no_bends(self):
        waypoints = _path(
            (Point(0, 0), None, Direction.EAST),
            (Point(5, 0), Direction.EAST, None),
        )
        assert build_corners(waypoints, radius=1.0) == []

    def test_bend_at_path_end_skipped(self):
        waypoints = [
            Waypoint(point=Point(0, 0), role=WaypointRole.BEND,
                     incoming=Direction.EAST, outgoing=Direction.SOUTH),
            Waypoint(point=Point(0, 5), role=WaypointRole.STATION, incoming=Direction.SOUTH),
        ]
        assert build_corners(waypoints, radius=1.0) == []

    def test_bend_without_turn_skipped(self, right_angle_waypoints):
        """Test that an unvalidated copy of a bend with no turn is ignored"""
        straightened = right_angle_waypoints[1].model_copy(update={'outgoing': Direction.EAST})
        waypoints = [right_angle_waypoints[0], straightened, right_angle_waypoints[2]]
        assert build_corners(waypoints, radius=1.0) == []

    def test_negative_radius(self, right_angle_waypoints):
        with pytest.raises(ValueError, match="radius"):
            build_corners(right_angle_waypoints, radius=-1)

    def test_tightness_out_of_range(self, right_angle_waypoints):
        with pytest.raises(ValueError, match="tightness"):
            build_corners(right_angle_waypoints, radius=1.0, tightness=1.5)

    def test_unknown_style(self, right_angle_waypoints):
        with pytest.raises(ValueError):
            build_corners(right_angle_waypoints, radius=1.0, style='bezier')


turns = st.sampled_from([-135, -90, -45, 45, 90, 135])
leg_lengths = st.floats(min_value=0.1, max_value=50)


class TestFilletProperties:
    """Property-based checks on fillet geometry"""

    @given(st.sampled_from(list(Direction)), turns, leg_lengths, leg_lengths,
           st.floats(min_value=0, max_value=5), st.sampled_from(['cubic', 'arc']))
    @settings(max_examples=200, deadline=None)
    def test_property_tangent_and_clamped(self, incoming, turn, leg_in, leg_out, radius, style):
        """Property: trim points sit on their legs and never pass the leg midpoint"""
        outgoing = incoming.rotate(turn)
        knee = Point(3, 7)
        previous = knee - incoming.unit.scale(leg_in)
        following = knee + outgoing.unit.scale(leg_out)
        bend = Waypoint(point=knee, role=WaypointRole.BEND, incoming=incoming, outgoing=outgoing)

        fillet = build_fillet(previous, bend, following, radius, style=CornerStyle(style))

        assert fillet.trim_distance <= min(leg_in, leg_out) / 2 + 1e-9
        assert fillet.trim_distance <= effective_radius(radius, turn) + 1e-9
        assert_parallel(knee - fillet.start, incoming, tolerance=1e-6)
        assert_parallel(fillet.end - knee, outgoing, tolerance=1e-6)

        if style == 'cubic':
            c1, c2 = fillet.control_points
            assert_parallel(c1 - fillet.start, incoming, tolerance=1e-6)
            assert_parallel(fillet.end - c2, outgoing, tolerance=1e-6)
        else:
            assert fillet.arc.center.distance_to(fillet.start) == pytest.approx(
                fillet.arc.radius, abs=1e-6)
            assert fillet.arc.center.distance_to(fillet.end) == pytest.approx(
                fillet.arc.radius, abs=1e-6)
