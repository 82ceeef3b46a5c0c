"""Unit tests for the planar geometry kernel.

These tests verify:
- Vector arithmetic and rotation
- Rectangle construction and vertex ordering
- Polygon area
- Point-in-polygon against the closest edge
- Segment intersection and segment distances
- Polygon overlap, containment and exact intersection area
"""

import math

import pytest

from furnishing.domain import geometry
from furnishing.domain.value_objects import Polygon2D, Vector2D


class TestVector2D:
    """Tests for Vector2D arithmetic."""

    def test_full_turn_rotation_is_identity(self) -> None:
        """Rotating by 2*pi returns the original vector."""
        vector = Vector2D(1.5, -0.75)
        rotated = vector.rotated(2 * math.pi)
        assert rotated.is_close(vector)

    def test_quarter_turn_is_counter_clockwise(self) -> None:
        """The x axis rotated by pi/2 points along z."""
        rotated = Vector2D(1.0, 0.0).rotated(math.pi / 2)
        assert rotated.is_close(Vector2D(0.0, 1.0))

    def test_rotation_about_center(self) -> None:
        """Rotation about a center keeps the distance to it."""
        center = Vector2D(1.0, 1.0)
        rotated = Vector2D(2.0, 1.0).rotated(math.pi, center)
        assert rotated.is_close(Vector2D(0.0, 1.0))

    def test_normalized_zero_vector(self) -> None:
        """The zero vector stays zero when normalized."""
        assert Vector2D(0.0, 0.0).normalized() == Vector2D(0.0, 0.0)

    def test_cross_sign(self) -> None:
        """Cross product is positive when the second vector is counter-clockwise."""
        assert Vector2D(1.0, 0.0).cross(Vector2D(0.0, 1.0)) > 0
        assert Vector2D(0.0, 1.0).cross(Vector2D(1.0, 0.0)) < 0

    def test_from_angle(self) -> None:
        """from_angle builds a vector of the given length."""
        vector = Vector2D.from_angle(math.pi / 2, 2.0)
        assert vector.is_close(Vector2D(0.0, 2.0))


class TestRectangles:
    """Tests for rectangle construction."""

    def test_rectangle_around_origin_vertex_order(self) -> None:
        """Vertices are ordered top-left, top-right, bottom-right, bottom-left."""
        rectangle = geometry.rectangle_around_origin(4.0, 2.0)
        assert rectangle.vertices == (
            Vector2D(-2.0, 1.0),
            Vector2D(2.0, 1.0),
            Vector2D(2.0, -1.0),
            Vector2D(-2.0, -1.0),
        )

    def test_rotated_rectangle_quarter_turn(self) -> None:
        """A quarter turn swaps the rectangle's extents."""
        rectangle = geometry.rotated_rectangle(2.0, 1.0, Vector2D(0.0, 0.0), math.pi / 2)
        xs = [vertex.x for vertex in rectangle.vertices]
        zs = [vertex.z for vertex in rectangle.vertices]
        assert max(xs) - min(xs) == pytest.approx(1.0)
        assert max(zs) - min(zs) == pytest.approx(2.0)


class TestArea:
    """Tests for polygon area."""

    def test_rectangle_area(self) -> None:
        """Area of a 3 x 2 rectangle is 6."""
        assert geometry.area(geometry.rectangle_around_origin(3.0, 2.0)) == pytest.approx(6.0)

    def test_area_is_translation_invariant(self) -> None:
        """Moving a polygon does not change its area."""
        polygon = Polygon2D.from_points([(0, 0), (2, 1), (1, 3), (-1, 2)])
        moved = polygon.translated(Vector2D(10.0, -7.5))
        assert geometry.area(moved) == pytest.approx(geometry.area(polygon))

    def test_area_ignores_winding(self) -> None:
        """Clockwise and counter-clockwise orderings have the same area."""
        polygon = geometry.rectangle_around_origin(3.0, 2.0)
        reversed_polygon = Polygon2D(tuple(reversed(polygon.vertices)))
        assert geometry.area(reversed_polygon) == pytest.approx(6.0)


class TestIsPointInside:
    """Tests for the closest-edge point-in-polygon test."""

    def test_center_is_inside(self) -> None:
        """The origin is inside a rectangle around the origin."""
        room = geometry.rectangle_around_origin(4.0, 3.0)
        assert geometry.is_point_inside(Vector2D(0.0, 0.0), room)

    def test_point_on_edge_is_not_inside(self) -> None:
        """A point exactly on the right wall is not inside."""
        room = geometry.rectangle_around_origin(4.0, 3.0)
        assert not geometry.is_point_inside(Vector2D(2.0, 0.0), room)

    def test_point_outside(self) -> None:
        """Points beyond any wall are outside."""
        room = geometry.rectangle_around_origin(4.0, 3.0)
        assert not geometry.is_point_inside(Vector2D(3.0, 0.0), room)
        assert not geometry.is_point_inside(Vector2D(0.0, -2.0), room)

    def test_point_near_corner_inside(self) -> None:
        """A point just inside a corner is inside."""
        room = geometry.rectangle_around_origin(4.0, 3.0)
        assert geometry.is_point_inside(Vector2D(1.9, 1.4), room)


class TestSegments:
    """Tests for segment intersection and distances."""

    def test_crossing_segments_intersect(self) -> None:
        """Two diagonals of a square cross."""
        assert geometry.segments_intersect(
            Vector2D(0, 0), Vector2D(1, 1), Vector2D(0, 1), Vector2D(1, 0)
        )

    def test_parallel_segments_never_intersect(self) -> None:
        """Parallel segments are reported as not intersecting, even when collinear."""
        assert not geometry.segments_intersect(
            Vector2D(0, 0), Vector2D(2, 0), Vector2D(1, 0), Vector2D(3, 0)
        )

    def test_disjoint_segments(self) -> None:
        """Segments whose lines cross outside both segments do not intersect."""
        assert not geometry.segments_intersect(
            Vector2D(0, 0), Vector2D(1, 0), Vector2D(2, -1), Vector2D(2, 1)
        )

    def test_intersection_point(self) -> None:
        """The crossing point of the diagonals is the square's center."""
        point = geometry.segment_intersection_point(
            Vector2D(0, 0), Vector2D(2, 2), Vector2D(0, 2), Vector2D(2, 0)
        )
        assert point is not None
        assert point.is_close(Vector2D(1.0, 1.0))

    def test_distance_to_segment_clamps_to_endpoints(self) -> None:
        """Points beyond a segment's end measure to the endpoint."""
        distance = geometry.distance_to_segment(Vector2D(3, 4), Vector2D(-1, 0), Vector2D(0, 0))
        assert distance == pytest.approx(5.0)

    def test_distance_to_segment_perpendicular(self) -> None:
        """Points beside a segment measure perpendicular to it."""
        distance = geometry.distance_to_segment(Vector2D(0.5, 2), Vector2D(0, 0), Vector2D(1, 0))
        assert distance == pytest.approx(2.0)

    def test_distance_to_degenerate_segment(self) -> None:
        """A zero-length segment measures to its single point."""
        distance = geometry.distance_to_segment(Vector2D(1, 1), Vector2D(0, 0), Vector2D(0, 0))
        assert distance == pytest.approx(math.sqrt(2))

    def test_distance_between_parallel_segments(self) -> None:
        """Parallel segments measure the gap between them."""
        distance = geometry.distance_between_segments(
            Vector2D(0, 0), Vector2D(1, 0), Vector2D(0, 0.5), Vector2D(1, 0.5)
        )
        assert distance == pytest.approx(0.5)

    def test_distance_between_crossing_segments(self) -> None:
        """Crossing segments have zero distance."""
        distance = geometry.distance_between_segments(
            Vector2D(0, 0), Vector2D(1, 1), Vector2D(0, 1), Vector2D(1, 0)
        )
        assert distance == 0.0


class TestPolygonOverlap:
    """Tests for polygon overlap and containment."""

    def test_overlapping_edges(self) -> None:
        """Partially overlapping squares overlap."""
        first = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.0, 0.0))
        second = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.5, 0.3))
        assert geometry.polygons_overlap(first, second)

    def test_containment_is_not_edge_overlap(self) -> None:
        """A small square inside a large one has no crossing edges."""
        outer = geometry.axis_aligned_rectangle(4.0, 4.0, Vector2D(0.0, 0.0))
        inner = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.0, 0.0))
        assert not geometry.polygons_overlap(outer, inner)

    def test_containment_is_detected(self) -> None:
        """polygons_intersect_or_contain catches containment."""
        outer = geometry.axis_aligned_rectangle(4.0, 4.0, Vector2D(0.0, 0.0))
        inner = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.2, 0.1))
        assert geometry.polygons_intersect_or_contain(
            outer, inner, Vector2D(0.0, 0.0), Vector2D(0.2, 0.1)
        )

    def test_separate_polygons(self) -> None:
        """Distant squares neither overlap nor contain each other."""
        first = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.0, 0.0))
        second = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(3.0, 0.0))
        assert not geometry.polygons_intersect_or_contain(
            first, second, Vector2D(0.0, 0.0), Vector2D(3.0, 0.0)
        )


class TestIntersectionArea:
    """Tests for exact intersection areas."""

    def test_half_overlap(self) -> None:
        """Two unit squares offset by half a side share half a square."""
        first = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.0, 0.0))
        second = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.5, 0.0))
        assert geometry.intersection_area(first, second) == pytest.approx(0.5)

    def test_contained_polygon(self) -> None:
        """A contained polygon's full area is shared."""
        outer = geometry.axis_aligned_rectangle(4.0, 4.0, Vector2D(0.0, 0.0))
        inner = geometry.axis_aligned_rectangle(1.0, 2.0, Vector2D(0.5, 0.5))
        assert geometry.intersection_area(outer, inner) == pytest.approx(2.0)

    def test_rotated_square_over_square(self) -> None:
        """A unit square turned 45 degrees over itself loses four corner triangles."""
        square = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.0, 0.0))
        diamond = geometry.rotated_rectangle(1.0, 1.0, Vector2D(0.0, 0.0), math.pi / 4)
        assert geometry.intersection_area(square, diamond) == pytest.approx(
            2 * (math.sqrt(2) - 1)
        )

    def test_disjoint_polygons(self) -> None:
        """Disjoint polygons share nothing."""
        first = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(0.0, 0.0))
        second = geometry.axis_aligned_rectangle(1.0, 1.0, Vector2D(5.0, 5.0))
        assert geometry.intersection_area(first, second) == 0.0


class TestAngleBetween:
    """Tests for unsigned angles between directions."""

    def test_perpendicular(self) -> None:
        assert geometry.angle_between(Vector2D(1, 0), Vector2D(0, 3)) == pytest.approx(math.pi / 2)

    def test_opposite(self) -> None:
        assert geometry.angle_between(Vector2D(1, 0), Vector2D(-2, 0)) == pytest.approx(math.pi)

    def test_zero_length_input(self) -> None:
        """A zero-length direction yields 0."""
        assert geometry.angle_between(Vector2D(0, 0), Vector2D(1, 0)) == 0.0
