"""Domain entities for room furnishing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from .errors import FurnishingConfigurationError
from . import geometry
from .value_objects import (
    BoundingBox3D,
    ClearanceArea,
    FittingCategorySpatialSemantics,
    Listing,
    Polygon2D,
    RoomCategory,
    RoomSemantics,
    Side,
    Vector2D,
)


@dataclass(frozen=True)
class RoomDescription:
    """Simple rectangular room description in meters."""

    width_in_meters: float
    depth_in_meters: float
    height_in_meters: float
    room_category: RoomCategory

    def __post_init__(self) -> None:
        if self.width_in_meters <= 0 or self.depth_in_meters <= 0:
            raise ValueError("Room width and depth must be positive")
        if self.height_in_meters <= 0:
            raise ValueError("Room height must be positive")


@dataclass(frozen=True)
class FittingModel:
    """A placeable template: a catalog listing plus its category semantics.

    Attributes:
        listing: Catalog item the model was built from.
        fitting_category: Category name, e.g. ``"chair"``.
        bounding_box: Footprint and height in meters.
        clearance_areas: Exactly four clearance areas, one per side.
        category_semantics: Placement rules for the category.
        half_diagonal: Half the footprint diagonal, derived from the bounding box.
    """

    listing: Listing
    fitting_category: str
    bounding_box: BoundingBox3D
    clearance_areas: tuple[ClearanceArea, ...]
    category_semantics: FittingCategorySpatialSemantics
    half_diagonal: float = field(init=False)

    def __post_init__(self) -> None:
        if len(self.clearance_areas) != 4:
            raise FurnishingConfigurationError(
                f"Fitting model for '{self.fitting_category}' needs 4 clearance areas, "
                f"got {len(self.clearance_areas)}"
            )
        sides = {clearance.side for clearance in self.clearance_areas}
        if sides != set(Side):
            raise FurnishingConfigurationError(
                f"Fitting model for '{self.fitting_category}' needs one clearance area per side"
            )
        object.__setattr__(self, "half_diagonal", self.bounding_box.half_diagonal)

    @property
    def base_area(self) -> float:
        return self.bounding_box.base_area

    @property
    def required_clearance_areas(self) -> list[ClearanceArea]:
        return [clearance for clearance in self.clearance_areas if clearance.is_required]

    def clearance_for(self, side: Side) -> ClearanceArea:
        for clearance in self.clearance_areas:
            if clearance.side is side:
                return clearance
        raise KeyError(side)

    @classmethod
    def from_listing_and_semantics(
        cls,
        listing: Listing,
        fitting_category: str,
        clearance_areas: Sequence[ClearanceArea],
        category_semantics: FittingCategorySpatialSemantics,
    ) -> FittingModel:
        """Build a model, converting the listing's centimeter dimensions to meters."""
        return cls(
            listing=listing,
            fitting_category=fitting_category,
            bounding_box=listing.dimensions.to_bounding_box(),
            clearance_areas=tuple(clearance_areas),
            category_semantics=category_semantics,
        )


@dataclass(eq=False)
class Fitting:
    """One placed instance of a fitting model.

    Identity matters: two fittings at the same spot with the same model are
    still different pieces of furniture, so equality is by identity.

    Attributes:
        position: Center of the footprint.
        orientation: Counter-clockwise rotation in radians.
        fitting_model: Shared, read-only model.
    """

    position: Vector2D
    orientation: float
    fitting_model: FittingModel
    _polygon_key: tuple[Vector2D, float] | None = field(
        default=None, init=False, repr=False
    )
    _polygon: Polygon2D | None = field(default=None, init=False, repr=False)

    @property
    def polygon(self) -> Polygon2D:
        """Bounding rectangle at the current position and orientation."""
        key = (self.position, self.orientation)
        if self._polygon is None or self._polygon_key != key:
            box = self.fitting_model.bounding_box
            self._polygon = geometry.rotated_rectangle(
                box.width, box.depth, self.position, self.orientation
            )
            self._polygon_key = key
        return self._polygon

    @property
    def category(self) -> str:
        return self.fitting_model.fitting_category

    def move_in_direction(self, step_length: float, direction: float) -> None:
        """Translate by ``step_length`` along ``direction`` radians from the x axis."""
        self.position = self.position + Vector2D.from_angle(direction, step_length)

    def rotate_counter_clockwise(self, angle: float) -> None:
        """Rotate by ``angle`` radians.

        The result is folded into ``[0, pi)``: a rectangle turned by half a
        turn has the same footprint.
        """
        self.orientation = (self.orientation + angle) % math.pi

    def copy(self) -> Fitting:
        """Copy position and orientation; the model stays shared."""
        copied = Fitting(self.position, self.orientation, self.fitting_model)
        copied._polygon_key = self._polygon_key
        copied._polygon = self._polygon
        return copied


@dataclass
class FittingSemantics:
    """Everything the furnisher knows about what it may place.

    Attributes:
        category_semantics: Spatial semantics keyed by fitting category.
        fitting_models: Available models, at most one per category.
        room_semantics: Priority lists, one per room category.
    """

    category_semantics: Mapping[str, FittingCategorySpatialSemantics]
    fitting_models: list[FittingModel]
    room_semantics: list[RoomSemantics]

    def models_for_category(self, fitting_category: str) -> list[FittingModel]:
        return [
            model
            for model in self.fitting_models
            if model.fitting_category == fitting_category
        ]

    def room_semantics_for(self, room_category: RoomCategory) -> RoomSemantics:
        """Return the priorities for ``room_category``.

        Raises:
            FurnishingConfigurationError: If the category has no entry.
        """
        for semantics in self.room_semantics:
            if semantics.room_category == room_category:
                return semantics
        category_name = getattr(room_category, "value", room_category)
        raise FurnishingConfigurationError(
            f"Fitting semantics does not include room category: {category_name}"
        )


@dataclass
class Room:
    """A rectangular room centred on the origin.

    Attributes:
        description: Dimensions and category, shared between clones.
        wall_polygon: Clockwise wall outline.
    """

    description: RoomDescription
    wall_polygon: Polygon2D

    @classmethod
    def from_description(
        cls, fitting_semantics: FittingSemantics, description: RoomDescription
    ) -> Room:
        """Build a room and check the semantics can furnish its category.

        Raises:
            FurnishingConfigurationError: If the room category has no priorities.
        """
        wall_polygon = geometry.rectangle_around_origin(
            description.width_in_meters, description.depth_in_meters
        )
        fitting_semantics.room_semantics_for(description.room_category)
        return cls(description=description, wall_polygon=wall_polygon)

    @property
    def height(self) -> float:
        return self.description.height_in_meters

    def area(self) -> float:
        return geometry.area(self.wall_polygon)

    def clone(self) -> Room:
        return Room(
            description=self.description,
            wall_polygon=Polygon2D(tuple(self.wall_polygon.vertices)),
        )
