"""Cost function for a single fitting within a layout.

The cost of a fitting is a weighted average of six terms, each roughly in
``[0, 1]``:

- overlap: collisions with other fittings
- clearance overlap: other fittings intruding into clearance zones
- wall overlap: penetration of the room walls
- wall distance: distance from the nearest wall, for wall-contact categories
- wall orientation: angle to the nearest wall
- relation: how well the best-matching spatial relation is satisfied

Only applicable weights enter the normalization, so a category without
relations or wall affinity is not rewarded for the missing terms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from . import geometry
from .entities import Fitting, Room
from .value_objects import (
    UNIT_X,
    FittingCostBreakdown,
    Polygon2D,
    Side,
    SpatialRelation,
    Vector2D,
)

if TYPE_CHECKING:
    from .fitting_layout import FittingLayout

__all__ = [
    "CostWeights",
    "FittingCostFunction",
    "WallCosts",
    "clearance_polygons",
    "overlap_estimate",
]


@dataclass(frozen=True)
class CostWeights:
    """Weights of the individual cost terms.

    ``wall_distance`` only applies to categories with ideal wall contact,
    ``relation`` only to categories with spatial relations, and
    ``clearance_overlap`` is scaled by the share of sides that carry a
    clearance area.
    """

    overlap: float = 0.2
    wall_overlap: float = 0.8
    wall_orientation: float = 0.1
    wall_distance: float = 0.2
    clearance_overlap: float = 0.1
    relation: float = 0.2


class WallCosts(NamedTuple):
    """Wall-related cost terms, computed together."""

    overlap: float
    distance: float
    orientation: float
    is_center_inside_room: bool


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def overlap_estimate(fitting: Fitting, other: Fitting) -> float:
    """Overlap of the two enclosing circles relative to their combined radii.

    Symmetric in its arguments and 0 when the circles do not touch.
    """
    radii = fitting.fitting_model.half_diagonal + other.fitting_model.half_diagonal
    if radii <= 0:
        return 0.0
    distance = fitting.position.distance_to(other.position)
    return _finite_or_zero(max(0.0, (radii - distance) / radii))


def clearance_polygons(fitting: Fitting) -> list[Polygon2D]:
    """Clearance rectangles around ``fitting`` for every side that needs one.

    Each rectangle spans the full side and extends ``perpendicular_length``
    outward, rotated with the fitting.
    """
    box = fitting.fitting_model.bounding_box
    polygons: list[Polygon2D] = []
    for side in Side:
        clearance = fitting.fitting_model.clearance_for(side)
        if not clearance.is_required:
            continue
        length = clearance.perpendicular_length
        if side in (Side.RIGHT, Side.LEFT):
            offset = box.width / 2 + length / 2
            width, depth = length, box.depth
        else:
            offset = box.depth / 2 + length / 2
            width, depth = box.width, length
        direction = fitting.orientation + side.value * math.pi / 2
        center = fitting.position + Vector2D.from_angle(direction, offset)
        polygons.append(
            geometry.rotated_rectangle(width, depth, center, fitting.orientation)
        )
    return polygons


def _angular_distance(first: float, second: float) -> float:
    """Smallest absolute difference between two angles, in ``[0, pi]``."""
    difference = (first - second) % (2 * math.pi)
    if difference > math.pi:
        difference = 2 * math.pi - difference
    return difference


class FittingCostFunction:
    """Scores one fitting against the rest of its layout.

    Attributes:
        weights: Term weights used by ``evaluate``.
    """

    def __init__(self, weights: CostWeights | None = None) -> None:
        self.weights = weights or CostWeights()

    def evaluate(self, layout: FittingLayout, fitting: Fitting) -> float:
        """Weighted, normalized cost of ``fitting`` in ``layout``."""
        return self.breakdown(layout, fitting).total

    def breakdown(self, layout: FittingLayout, fitting: Fitting) -> FittingCostBreakdown:
        """Compute every cost term and the weighted total."""
        semantics = fitting.fitting_model.category_semantics
        others = [other for other in layout.placed_fittings if other is not fitting]

        overlap = self.overlap_cost(fitting, others)
        clearance_overlap = self.clearance_overlap_cost(fitting, others)
        wall = self.wall_costs(layout.room, fitting)
        relation = self.spatial_relation_cost(fitting, others, wall.is_center_inside_room)

        weights = self.weights
        wall_distance_weight = weights.wall_distance if semantics.has_ideal_wall_contact else 0.0
        clearance_weight = weights.clearance_overlap * (
            len(fitting.fitting_model.required_clearance_areas) / 4
        )
        relation_weight = weights.relation if semantics.spatial_relations else 0.0

        applicable_weights = (
            weights.overlap
            + weights.wall_overlap
            + weights.wall_orientation
            + wall_distance_weight
            + clearance_weight
            + relation_weight
        )
        weighted = (
            weights.overlap * overlap
            + weights.wall_overlap * wall.overlap
            + weights.wall_orientation * wall.orientation
            + wall_distance_weight * wall.distance
            + clearance_weight * clearance_overlap
            + relation_weight * relation
        )
        total = weighted / applicable_weights if applicable_weights > 0 else 0.0

        return FittingCostBreakdown(
            overlap=overlap,
            clearance_overlap=clearance_overlap,
            wall_overlap=wall.overlap,
            wall_distance=wall.distance,
            wall_orientation=wall.orientation,
            relation=relation,
            total=_finite_or_zero(total),
            is_center_inside_room=wall.is_center_inside_room,
        )

    def overlap_cost(self, fitting: Fitting, others: list[Fitting]) -> float:
        """Average overlap estimate over the fittings that actually collide."""
        total = 0.0
        colliding = 0
        for other in others:
            estimate = overlap_estimate(fitting, other)
            if estimate <= 0:
                continue
            if geometry.polygons_intersect_or_contain(
                fitting.polygon, other.polygon, fitting.position, other.position
            ):
                colliding += 1
                total += estimate

        if colliding == 0:
            return 0.0
        return _finite_or_zero(total / colliding)

    def clearance_overlap_cost(self, fitting: Fitting, others: list[Fitting]) -> float:
        """Average overlap estimate of fittings intruding into clearance zones."""
        zones = clearance_polygons(fitting)
        if not zones:
            return 0.0

        total = 0.0
        colliding = 0
        for zone in zones:
            for other in others:
                estimate = overlap_estimate(fitting, other)
                if estimate <= 0:
                    continue
                if geometry.polygons_overlap(zone, other.polygon):
                    colliding += 1
                    total += estimate

        if colliding == 0:
            return 0.0
        return _finite_or_zero(total / (colliding * len(zones)))

    def wall_costs(self, room: Room, fitting: Fitting) -> WallCosts:
        """Wall overlap, wall distance and wall orientation costs.

        The nearest wall to the fitting's center decides whether the center
        is inside the room. Penetration is first estimated from the enclosing
        circle and refined with exact rectangle-to-wall distances when the
        circle penetrates or the category wants wall contact.
        """
        model = fitting.fitting_model
        half_diagonal = model.half_diagonal
        facing = Vector2D.from_angle(fitting.orientation)
        wall_edges = room.wall_polygon.edges()

        closest_center_distance = math.inf
        is_center_inside_room = False
        angle_to_closest_wall = 0.0

        for start, end in wall_edges:
            distance = geometry.distance_to_segment(fitting.position, start, end)
            if distance < closest_center_distance:
                closest_center_distance = distance
                is_center_inside_room = (end - start).cross(fitting.position - start) < 0
                angle_to_closest_wall = geometry.angle_between(end - start, facing)

        sign = -1.0 if is_center_inside_room else 1.0

        def relative_penetration() -> float:
            if half_diagonal <= 0:
                return 0.0
            return max(
                0.0,
                (half_diagonal + sign * closest_center_distance) / (2 * half_diagonal),
            )

        wall_penetration = relative_penetration()
        wall_distance_cost = 0.0
        has_wall_contact = model.category_semantics.has_ideal_wall_contact

        if (wall_penetration > 0 and is_center_inside_room) or has_wall_contact:
            fitting_edges = fitting.polygon.edges()
            closest_wall_distance = math.inf
            for wall_start, wall_end in wall_edges:
                for edge_start, edge_end in fitting_edges:
                    distance = geometry.distance_between_segments(
                        wall_start, wall_end, edge_start, edge_end
                    )
                    if distance < closest_wall_distance:
                        closest_wall_distance = distance
                        angle_to_closest_wall = geometry.angle_between(
                            wall_end - wall_start, facing
                        )

            clear_of_walls = closest_wall_distance > 0 and is_center_inside_room

            if has_wall_contact:
                if clear_of_walls and half_diagonal > 0:
                    relative_distance = closest_wall_distance / (2 * half_diagonal)
                else:
                    relative_distance = relative_penetration()
                wall_distance_cost = _finite_or_zero(
                    relative_distance / (0.1 + relative_distance)
                )

            if clear_of_walls:
                wall_penetration = 0.0

        wall_overlap_cost = _finite_or_zero(wall_penetration / (wall_penetration + 0.5))

        if is_center_inside_room:
            wall_orientation_cost = _finite_or_zero(angle_to_closest_wall / math.pi)
        else:
            wall_orientation_cost = 1.0

        return WallCosts(
            overlap=wall_overlap_cost,
            distance=wall_distance_cost,
            orientation=wall_orientation_cost,
            is_center_inside_room=is_center_inside_room,
        )

    def spatial_relation_cost(
        self, fitting: Fitting, others: list[Fitting], is_center_inside_room: bool
    ) -> float:
        """Cost of the best-satisfied relation to any other fitting, 0 if none apply."""
        semantics = fitting.fitting_model.category_semantics
        if not semantics.spatial_relations:
            return 0.0

        lowest = math.inf
        for other in others:
            for relation in semantics.relations_to(other.category):
                cost = self.relation_cost(fitting, other, relation, is_center_inside_room)
                if cost < lowest:
                    lowest = cost

        if lowest == math.inf:
            return 0.0
        return lowest

    def relation_cost(
        self,
        fitting: Fitting,
        related: Fitting,
        relation: SpatialRelation,
        is_center_inside_room: bool,
    ) -> float:
        """Cost of ``fitting`` with respect to one relation to ``related``.

        Combines side idealness (which side of ``related`` the fitting is
        on), alignment with that side's normal, orientation relative to
        ``related`` and distance between the facing edges.
        """
        delta = fitting.position - related.position
        if delta.length_squared == 0:
            delta = UNIT_X

        related_box = related.fitting_model.bounding_box
        local_to_related = delta.rotated(-related.orientation)
        direction_from_related = Vector2D(
            local_to_related.x / related_box.width,
            local_to_related.z / related_box.depth,
        ).normalized()
        related_side = Side.from_angle(
            math.atan2(direction_from_related.z, direction_from_related.x)
        )

        own_box = fitting.fitting_model.bounding_box
        local_to_fitting = (-delta).rotated(-fitting.orientation)
        direction_to_related = Vector2D(
            local_to_fitting.x / own_box.width,
            local_to_fitting.z / own_box.depth,
        ).normalized()
        facing_side = Side.from_angle(
            math.atan2(direction_to_related.z, direction_to_related.x)
        )

        side_idealness = relation.probability_for(related_side)
        alignment_idealness = 1 - geometry.angle_between(
            related_side.normal, direction_from_related
        ) / (math.pi / 4)

        orientation_difference = _angular_distance(
            fitting.orientation + math.pi / 2,
            related.orientation + related_side.value * math.pi / 2,
        )
        orientation_idealness = (
            1 - orientation_difference / math.pi if is_center_inside_room else 0.0
        )

        own_start, own_end = facing_side.edge_indices
        related_start, related_end = related_side.edge_indices
        own_polygon = fitting.polygon
        related_polygon = related.polygon
        edge_distance = geometry.distance_between_segments(
            own_polygon[own_start],
            own_polygon[own_end],
            related_polygon[related_start],
            related_polygon[related_end],
        )
        distance_delta = abs(relation.ideal_distance - edge_distance)
        distance_idealness = 1 - distance_delta / (
            distance_delta + 0.25 * relation.ideal_distance + 0.0001
        )

        cost = 1 - (
            0.2 * side_idealness
            + 0.2 * orientation_idealness
            + 0.2 * alignment_idealness
            + 0.4 * distance_idealness
        )
        return _finite_or_zero(cost)
