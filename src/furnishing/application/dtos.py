"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from furnishing.domain import RoomDescription, RoomConfiguration

if TYPE_CHECKING:
    from furnishing.domain import FittingLayout, FurnishingResult


class FurnitureSelectionType(str, Enum):
    """How one representative listing per fitting category is chosen."""

    RANDOM = "random"
    MATCHING_SEARCH = "matching search"


@dataclass
class RoomCreationRequest:
    """Input DTO for furnishing one room.

    Attributes:
        room_description: Room dimensions and category.
        fill_target: Share of the floor area to cover with fittings.
        furniture_selection_type: Listing selection mode.
        furniture_search_selection_keywords: Keywords tried in turn in
            matching search mode.
    """

    room_description: RoomDescription
    fill_target: float = 0.3
    furniture_selection_type: FurnitureSelectionType = FurnitureSelectionType.RANDOM
    furniture_search_selection_keywords: list[str] = field(default_factory=list)

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not 0 < self.fill_target <= 1:
            errors.append("Fill target must be greater than 0 and at most 1")
        if (
            self.furniture_selection_type is FurnitureSelectionType.MATCHING_SEARCH
            and not self.furniture_search_selection_keywords
        ):
            errors.append("Matching search selection requires at least one search keyword")
        return errors


@dataclass
class FurnishRoomOutput:
    """Output DTO containing the furnishing results.

    Attributes:
        room_configuration: Exported layout, None if furnishing failed.
        result: Optimizer result with costs and statistics.
        skipped_categories: Fitting categories without a catalog listing.
        errors: List of error messages if furnishing failed.
    """

    room_configuration: RoomConfiguration | None = None
    result: FurnishingResult | None = None
    skipped_categories: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the room was furnished successfully."""
        return len(self.errors) == 0

    @property
    def layout(self) -> FittingLayout | None:
        return self.result.layout if self.result is not None else None
