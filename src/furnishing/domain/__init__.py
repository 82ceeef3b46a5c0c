"""Domain layer - core business logic."""

from .entities import Fitting, FittingModel, FittingSemantics, Room, RoomDescription
from .errors import FurnishingCancelledError, FurnishingConfigurationError, FurnishingError
from .fitting_cost import CostWeights, FittingCostFunction
from .fitting_layout import FittingLayout
from .services import FurnishingResult, RoomFurnisher
from .value_objects import (
    AnnealingSchedule,
    ClearanceArea,
    FittingCategorySpatialSemantics,
    FittingPriority,
    Listing,
    ListingDimensions,
    RoomCategory,
    RoomConfiguration,
    Side,
    Vector2D,
)

__all__ = [
    "AnnealingSchedule",
    "ClearanceArea",
    "CostWeights",
    "Fitting",
    "FittingCategorySpatialSemantics",
    "FittingCostFunction",
    "FittingLayout",
    "FittingModel",
    "FittingPriority",
    "FittingSemantics",
    "FurnishingCancelledError",
    "FurnishingConfigurationError",
    "FurnishingError",
    "FurnishingResult",
    "Listing",
    "ListingDimensions",
    "Room",
    "RoomCategory",
    "RoomConfiguration",
    "RoomDescription",
    "RoomFurnisher",
    "Side",
    "Vector2D",
]
