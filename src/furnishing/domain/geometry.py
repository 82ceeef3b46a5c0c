"""Planar geometry kernel for furniture placement.

Pure functions over ``Vector2D`` and ``Polygon2D``:
- Rectangle construction (axis-aligned and rotated)
- Polygon area
- Approximate point-in-polygon test
- Segment intersection and segment distances
- Edge-crossing polygon overlap test
- Exact overlap areas (via shapely)

Rectangles are built with vertices ordered top-left, top-right,
bottom-right, bottom-left (clockwise with ``z`` pointing up), which is the
ordering ``is_point_inside`` expects.
"""

from __future__ import annotations

import math

from shapely.geometry import Polygon as ShapelyPolygon

from .value_objects import Polygon2D, Vector2D

__all__ = [
    "rectangle_around_origin",
    "axis_aligned_rectangle",
    "rotated_rectangle",
    "area",
    "is_point_inside",
    "segments_intersect",
    "segment_intersection_point",
    "distance_to_segment",
    "distance_between_segments",
    "polygons_overlap",
    "polygons_intersect_or_contain",
    "intersection_area",
    "angle_between",
]

# Segments shorter than this are treated as points.
_EPSILON = 1e-12


def rectangle_around_origin(width: float, depth: float) -> Polygon2D:
    """Axis-aligned rectangle centred on the origin, ordered TL, TR, BR, BL."""
    half_width = width / 2
    half_depth = depth / 2
    return Polygon2D(
        (
            Vector2D(-half_width, half_depth),
            Vector2D(half_width, half_depth),
            Vector2D(half_width, -half_depth),
            Vector2D(-half_width, -half_depth),
        )
    )


def axis_aligned_rectangle(width: float, depth: float, center: Vector2D) -> Polygon2D:
    """Axis-aligned rectangle centred on ``center``."""
    return rectangle_around_origin(width, depth).translated(center)


def rotated_rectangle(
    width: float, depth: float, center: Vector2D, angle: float
) -> Polygon2D:
    """Rectangle centred on ``center`` rotated counter-clockwise by ``angle`` radians."""
    rectangle = axis_aligned_rectangle(width, depth, center)
    if angle == 0.0:
        return rectangle
    return rectangle.rotated(angle, center)


def area(polygon: Polygon2D) -> float:
    """Unsigned area of a simple polygon (shoelace formula)."""
    total = 0.0
    for start, end in polygon.edges():
        total += start.x * end.z - end.x * start.z
    result = abs(total) / 2
    if not math.isfinite(result):
        return 0.0
    return result


def distance_to_segment(point: Vector2D, start: Vector2D, end: Vector2D) -> float:
    """Shortest distance from ``point`` to the segment ``start``-``end``.

    The projection of the point onto the segment is clamped to the segment;
    a zero-length segment degenerates to point distance.
    """
    segment = end - start
    length_squared = segment.length_squared
    if length_squared < _EPSILON:
        return point.distance_to(start)

    projection = (point - start).dot(segment) / length_squared
    if projection < 0:
        return point.distance_to(start)
    if projection > 1:
        return point.distance_to(end)
    return point.distance_to(start + segment.scale(projection))


def is_point_inside(point: Vector2D, polygon: Polygon2D) -> bool:
    """Approximate point-in-polygon test.

    Finds the edge closest to ``point`` and checks which side of that edge
    the point lies on; a point to the right of a clockwise edge is inside.
    This is exact for convex polygons only.
    """
    closest_distance = math.inf
    closest_edge: tuple[Vector2D, Vector2D] | None = None

    for start, end in polygon.edges():
        distance = distance_to_segment(point, start, end)
        if distance < closest_distance:
            closest_distance = distance
            closest_edge = (start, end)

    if closest_edge is None:
        return False

    start, end = closest_edge
    return (end - start).cross(point - start) < 0


def _intersection_parameters(
    start1: Vector2D, end1: Vector2D, start2: Vector2D, end2: Vector2D
) -> tuple[float, float] | None:
    """Parametric positions of the intersection along both segments, or None if parallel."""
    delta1 = end1 - start1
    delta2 = end2 - start2
    determinant = delta2.z * delta1.x - delta2.x * delta1.z
    if determinant == 0:
        return None

    offset_x = start1.x - start2.x
    offset_z = start1.z - start2.z
    t1 = (delta2.x * offset_z - delta2.z * offset_x) / determinant
    t2 = (delta1.x * offset_z - delta1.z * offset_x) / determinant
    return t1, t2


def segments_intersect(
    start1: Vector2D, end1: Vector2D, start2: Vector2D, end2: Vector2D
) -> bool:
    """Return True when the two segments cross. Parallel segments never intersect."""
    parameters = _intersection_parameters(start1, end1, start2, end2)
    if parameters is None:
        return False
    t1, t2 = parameters
    return 0 <= t1 <= 1 and 0 <= t2 <= 1


def segment_intersection_point(
    start1: Vector2D, end1: Vector2D, start2: Vector2D, end2: Vector2D
) -> Vector2D | None:
    """Crossing point of two segments, or None if they are parallel or do not meet."""
    parameters = _intersection_parameters(start1, end1, start2, end2)
    if parameters is None:
        return None
    t1, t2 = parameters
    if 0 <= t1 <= 1 and 0 <= t2 <= 1:
        return start1 + (end1 - start1).scale(t1)
    return None


def distance_between_segments(
    start1: Vector2D, end1: Vector2D, start2: Vector2D, end2: Vector2D
) -> float:
    """Shortest distance between two segments, 0 when they intersect."""
    if segments_intersect(start1, end1, start2, end2):
        return 0.0
    return min(
        distance_to_segment(start1, start2, end2),
        distance_to_segment(end1, start2, end2),
        distance_to_segment(start2, start1, end1),
        distance_to_segment(end2, start1, end1),
    )


def polygons_overlap(first: Polygon2D, second: Polygon2D) -> bool:
    """Return True if any edge of ``first`` crosses any edge of ``second``.

    Full containment without an edge crossing is not detected; see
    ``polygons_intersect_or_contain``.
    """
    second_edges = second.edges()
    for start1, end1 in first.edges():
        for start2, end2 in second_edges:
            if segments_intersect(start1, end1, start2, end2):
                return True
    return False


def polygons_intersect_or_contain(
    first: Polygon2D,
    second: Polygon2D,
    first_center: Vector2D,
    second_center: Vector2D,
) -> bool:
    """Overlap test that also catches one polygon sitting inside the other."""
    if is_point_inside(first_center, second) or is_point_inside(second_center, first):
        return True
    return polygons_overlap(first, second)


def _to_shapely(polygon: Polygon2D) -> ShapelyPolygon:
    return ShapelyPolygon([(vertex.x, vertex.z) for vertex in polygon.vertices])


def intersection_area(first: Polygon2D, second: Polygon2D) -> float:
    """Exact area shared by two simple polygons."""
    return _to_shapely(first).intersection(_to_shapely(second)).area


def angle_between(first: Vector2D, second: Vector2D) -> float:
    """Unsigned angle in ``[0, pi]`` between two directions.

    Zero-length inputs yield 0.
    """
    first_unit = first.normalized()
    second_unit = second.normalized()
    if first_unit.length_squared == 0 or second_unit.length_squared == 0:
        return 0.0
    cosine = max(-1.0, min(1.0, first_unit.dot(second_unit)))
    return math.acos(cosine)
