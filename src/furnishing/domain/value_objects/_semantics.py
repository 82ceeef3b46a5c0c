"""Placement semantics value objects.

These records describe how a furniture category wants to be placed: which
sides need clearance, whether it belongs against a wall, and which other
categories it likes to sit next to.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from ._geometry import UNIT_X, UNIT_Z, Vector2D


class Side(int, Enum):
    """One of the four sides of a fitting's bounding rectangle.

    Values follow counter-clockwise order starting at the local +x axis, so
    ``Side(k)`` has its outward normal at ``k * pi/2`` radians in the
    fitting's own frame. Front faces local -z.
    """

    RIGHT = 0
    BACK = 1
    LEFT = 2
    FRONT = 3

    @property
    def normal(self) -> Vector2D:
        """Outward unit normal in the fitting's local frame."""
        return _SIDE_NORMALS[self]

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def edge_indices(self) -> tuple[int, int]:
        """Vertex indices of this side's edge in a TL, TR, BR, BL rectangle."""
        return ((1 - self.value) % 4, (2 - self.value) % 4)

    @classmethod
    def from_angle(cls, angle: float) -> Side:
        """Map a local-frame direction angle (radians) to the side it points at.

        Each side owns the quarter circle centred on its normal, e.g. RIGHT
        covers ``[-pi/4, pi/4)``.
        """
        quarter = math.floor((angle % (2 * math.pi) + math.pi / 4) / (math.pi / 2))
        return cls(quarter % 4)

    @classmethod
    def from_label(cls, label: str) -> Side:
        return cls[label.upper()]


_SIDE_NORMALS = {
    Side.RIGHT: UNIT_X,
    Side.BACK: UNIT_Z,
    Side.LEFT: -UNIT_X,
    Side.FRONT: -UNIT_Z,
}


class Orientedness(str, Enum):
    """How much a category's rotation matters."""

    ORIENTED = "oriented"
    SYMMETRICAL = "symmetrical"
    EQUILATERAL = "equilateral"


class PlacementLocation(str, Enum):
    """Where a category is physically mounted."""

    FLOOR = "floor"
    WALL = "wall"
    CEILING = "ceiling"
    FITTING = "fitting"


class RoomCategory(str, Enum):
    """Room categories the furnisher knows priorities for."""

    LIVING_ROOM = "living room"
    DINING_ROOM = "dining room"
    FAMILY_ROOM = "family room"
    OFFICE = "office"
    BEDROOM = "bedroom"
    KITCHEN = "kitchen"
    CONFERENCE_ROOM = "conference room"
    GENERIC = "generic"


@dataclass(frozen=True)
class ClearanceArea:
    """Buffer zone on one side of a fitting that should stay unobstructed.

    Attributes:
        side: Side of the bounding rectangle the zone is attached to.
        perpendicular_length: Depth of the zone away from that side in meters.
            Zero means no clearance is needed on that side.
    """

    side: Side
    perpendicular_length: float

    def __post_init__(self) -> None:
        if self.perpendicular_length < 0:
            raise ValueError("Clearance length cannot be negative")

    @property
    def is_required(self) -> bool:
        return self.perpendicular_length > 0


@dataclass(frozen=True)
class SpatialRelation:
    """Preference of one category to sit near another.

    Side probabilities say how desirable it is to be found on that side of
    the related fitting.
    """

    related_fitting_category: str
    ideal_distance: float
    ideal_orientation: float = 0.0
    right_side_probability: float = 0.0
    back_side_probability: float = 0.0
    left_side_probability: float = 0.0
    front_side_probability: float = 0.0

    def __post_init__(self) -> None:
        if self.ideal_distance < 0:
            raise ValueError("Ideal distance cannot be negative")

    def probability_for(self, side: Side) -> float:
        if side is Side.RIGHT:
            return self.right_side_probability
        if side is Side.BACK:
            return self.back_side_probability
        if side is Side.LEFT:
            return self.left_side_probability
        return self.front_side_probability


@dataclass(frozen=True)
class FittingCategorySpatialSemantics:
    """Static placement rules for one fitting category."""

    fitting_category: str
    orientedness: Orientedness = Orientedness.EQUILATERAL
    has_ideal_wall_contact: bool = False
    ideal_orientation_to_wall: float = 0.0
    spatial_relations: tuple[SpatialRelation, ...] = ()

    def relations_to(self, category: str) -> list[SpatialRelation]:
        return [
            relation
            for relation in self.spatial_relations
            if relation.related_fitting_category == category
        ]


@dataclass(frozen=True)
class FittingCategory:
    """A catalog category and the search hints used to find listings for it."""

    name: str
    placement_location: PlacementLocation = PlacementLocation.FLOOR
    associated_keywords: tuple[str, ...] = ()
    name_matches: tuple[str, ...] = ()


@dataclass(frozen=True)
class FittingPriority:
    """Importance curve of one category within a room category.

    Importance decays geometrically with the number of items of the
    category already selected.
    """

    fitting_category: str
    initial_importance: float
    subsequent_importance_factor: float

    def __post_init__(self) -> None:
        if self.initial_importance < 0:
            raise ValueError("Initial importance cannot be negative")
        if self.subsequent_importance_factor < 0:
            raise ValueError("Subsequent importance factor cannot be negative")


@dataclass(frozen=True)
class RoomSemantics:
    """Ordered fitting priorities for a room category."""

    room_category: RoomCategory
    fitting_priorities: tuple[FittingPriority, ...] = field(default_factory=tuple)

    @property
    def fitting_categories(self) -> list[str]:
        return [priority.fitting_category for priority in self.fitting_priorities]
