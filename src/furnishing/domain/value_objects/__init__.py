"""Value objects for the furnishing domain.

This module provides immutable data types used throughout the furnishing
system. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Planar geometry
from ._geometry import (
    UNIT_X,
    UNIT_Z,
    ZERO_2D,
    BoundingBox3D,
    Polygon2D,
    Vector2D,
)

# Placement semantics
from ._semantics import (
    ClearanceArea,
    FittingCategory,
    FittingCategorySpatialSemantics,
    FittingPriority,
    Orientedness,
    PlacementLocation,
    RoomCategory,
    RoomSemantics,
    Side,
    SpatialRelation,
)

# Catalog listings
from ._catalog import Listing, ListingDimensions, ListingQuery

# Output format
from ._room_configuration import RoomConfiguration, RoomObject

# Optimizer settings and diagnostics
from ._annealing import AnnealingSchedule, FittingCostBreakdown

__all__ = [
    "AnnealingSchedule",
    "BoundingBox3D",
    "ClearanceArea",
    "FittingCategory",
    "FittingCategorySpatialSemantics",
    "FittingCostBreakdown",
    "FittingPriority",
    "Listing",
    "ListingDimensions",
    "ListingQuery",
    "Orientedness",
    "PlacementLocation",
    "Polygon2D",
    "RoomCategory",
    "RoomConfiguration",
    "RoomObject",
    "RoomSemantics",
    "Side",
    "SpatialRelation",
    "UNIT_X",
    "UNIT_Z",
    "Vector2D",
    "ZERO_2D",
]
